from typing import Iterable, List, Sequence
from mixmaster.models import ActiveFilter, AlcoholicFlag, RecipeRecord
from mixmaster.services.ingredient_service import can_make

def apply_filter(
    recipes: Sequence[RecipeRecord],
    active_filter: ActiveFilter,
    inventory: Iterable[str] = ()
) -> List[RecipeRecord]:
    """Stable sub-sequence of `recipes` matching the active filter.

    The inventory is only consulted for CAN_MAKE. Records whose alcoholic
    status is optional or unknown match neither ALCOHOLIC nor NON_ALCOHOLIC.
    """
    if active_filter == ActiveFilter.ALL:
        return list(recipes)
    
    if active_filter == ActiveFilter.ALCOHOLIC:
        return [recipe for recipe in recipes if recipe.alcoholic_flag == AlcoholicFlag.ALCOHOLIC]
    
    if active_filter == ActiveFilter.NON_ALCOHOLIC:
        return [recipe for recipe in recipes if recipe.alcoholic_flag == AlcoholicFlag.NON_ALCOHOLIC]
    
    if active_filter == ActiveFilter.CAN_MAKE:
        on_hand = tuple(inventory)
        return [recipe for recipe in recipes if can_make(recipe, on_hand)]
    
    raise ValueError(f"Unknown filter: {active_filter!r}")
