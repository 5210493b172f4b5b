"""Session state container.

The Renderer and the SearchDispatcher talk to the browser only through
intents. `apply_intent` is a pure reducer; `Store` holds the current state
and tells subscribers whenever it changes.
"""
from dataclasses import dataclass, replace
from typing import Callable, List, Tuple
from mixmaster.models import ActiveFilter, ActiveTab, BrowserState, RecipeRecord
from mixmaster.services.favorites_service import toggle_favorite
from mixmaster.services.filter_pipeline import apply_filter
from mixmaster.services.ingredient_service import (
    add_inventory_item,
    remove_inventory_item,
    toggle_inventory_item,
)

@dataclass(frozen=True)
class ChangeFilter:
    active_filter: ActiveFilter

@dataclass(frozen=True)
class ChangeTab:
    active_tab: ActiveTab

@dataclass(frozen=True)
class ChangeSearchTerm:
    """Records the term and issues the next request id"""
    term: str

@dataclass(frozen=True)
class LookupSucceeded:
    request_id: int
    recipes: Tuple[RecipeRecord, ...]

@dataclass(frozen=True)
class LookupFailed:
    request_id: int
    error: str

@dataclass(frozen=True)
class ToggleFavorite:
    recipe_id: str

@dataclass(frozen=True)
class ToggleInventoryItem:
    name: str

@dataclass(frozen=True)
class AddInventoryItem:
    name: str

@dataclass(frozen=True)
class RemoveInventoryItem:
    name: str

@dataclass(frozen=True)
class SelectRecipe:
    recipe_id: str

@dataclass(frozen=True)
class DismissDetail:
    pass

def apply_intent(state: BrowserState, intent) -> BrowserState:
    if isinstance(intent, ChangeFilter):
        return replace(state, active_filter=intent.active_filter)
    
    if isinstance(intent, ChangeTab):
        return replace(state, active_tab=intent.active_tab)
    
    if isinstance(intent, ChangeSearchTerm):
        return replace(
            state,
            search_term=intent.term,
            loading=True,
            latest_request_id=state.latest_request_id + 1
        )
    
    if isinstance(intent, LookupSucceeded):
        # Only the most recently issued request may replace the list
        if intent.request_id != state.latest_request_id:
            return state
        return replace(state, recipes=tuple(intent.recipes), loading=False, last_error=None)
    
    if isinstance(intent, LookupFailed):
        if intent.request_id != state.latest_request_id:
            return state
        return replace(state, loading=False, last_error=intent.error)
    
    if isinstance(intent, ToggleFavorite):
        return _toggle_favorite(state, intent.recipe_id)
    
    if isinstance(intent, ToggleInventoryItem):
        return replace(state, inventory=toggle_inventory_item(state.inventory, intent.name))
    
    if isinstance(intent, AddInventoryItem):
        return replace(state, inventory=add_inventory_item(state.inventory, intent.name))
    
    if isinstance(intent, RemoveInventoryItem):
        return replace(state, inventory=remove_inventory_item(state.inventory, intent.name))
    
    if isinstance(intent, SelectRecipe):
        recipe = state.find_recipe(intent.recipe_id)
        if recipe is None:
            return state
        return replace(state, selected_recipe=recipe)
    
    if isinstance(intent, DismissDetail):
        return replace(state, selected_recipe=None)
    
    raise TypeError(f"Unknown intent: {intent!r}")

def _toggle_favorite(state: BrowserState, recipe_id: str) -> BrowserState:
    if state.is_favorite(recipe_id):
        favorite_records = {fav_id: record for fav_id, record in state.favorite_records.items()
                            if fav_id != recipe_id}
        return replace(state, favorite_ids=toggle_favorite(state.favorite_ids, recipe_id),
                       favorite_records=favorite_records)
    
    # Only recipes we can show may be starred
    recipe = state.find_recipe(recipe_id)
    if recipe is None:
        return state
    
    favorite_records = dict(state.favorite_records)
    favorite_records[recipe_id] = recipe
    return replace(state, favorite_ids=toggle_favorite(state.favorite_ids, recipe_id),
                   favorite_records=favorite_records)

def visible_recipes(state: BrowserState) -> List[RecipeRecord]:
    """The current results as seen through the active filter"""
    return apply_filter(state.recipes, state.active_filter, state.inventory)

Subscriber = Callable[[BrowserState], None]

class Store:
    """Holds the current BrowserState and applies intents one at a time"""
    
    def __init__(self, state: BrowserState = None):
        self._state = state or BrowserState()
        self._subscribers: List[Subscriber] = []
    
    @property
    def state(self) -> BrowserState:
        return self._state
    
    def dispatch(self, intent) -> BrowserState:
        new_state = apply_intent(self._state, intent)
        if new_state is not self._state:
            self._state = new_state
            for subscriber in list(self._subscribers):
                subscriber(new_state)
        return self._state
    
    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register a callback for state changes; returns an unsubscribe function"""
        self._subscribers.append(subscriber)
        
        def unsubscribe():
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)
        
        return unsubscribe
