from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .recipe import RecipeRecord

class ActiveFilter(Enum):
    ALL = "all"
    ALCOHOLIC = "alcoholic"
    NON_ALCOHOLIC = "non-alcoholic"
    CAN_MAKE = "can-make"

class ActiveTab(Enum):
    COCKTAILS = "cocktails"
    MY_BAR = "bar"
    FAVORITES = "favorites"

@dataclass(frozen=True)
class BrowserState:
    """Everything the browser knows during one session.

    Instances are never mutated; every intent produces a new state.
    `favorite_records` is replaced wholesale, never edited in place.
    """
    recipes: Tuple[RecipeRecord, ...] = ()
    search_term: str = ""
    active_filter: ActiveFilter = ActiveFilter.ALL
    active_tab: ActiveTab = ActiveTab.COCKTAILS
    inventory: Tuple[str, ...] = ()
    favorite_ids: Tuple[str, ...] = ()
    favorite_records: Dict[str, RecipeRecord] = field(default_factory=dict)
    selected_recipe: Optional[RecipeRecord] = None
    loading: bool = False
    last_error: Optional[str] = None
    latest_request_id: int = 0
    
    @property
    def favorites(self) -> List[RecipeRecord]:
        """Favorited records in the order they were starred"""
        return [self.favorite_records[recipe_id] for recipe_id in self.favorite_ids
                if recipe_id in self.favorite_records]
    
    def is_favorite(self, recipe_id: str) -> bool:
        return recipe_id in self.favorite_ids
    
    def find_recipe(self, recipe_id: str) -> Optional[RecipeRecord]:
        """Look up a record in the current results, then among favorites"""
        for recipe in self.recipes:
            if recipe.id == recipe_id:
                return recipe
        return self.favorite_records.get(recipe_id)
