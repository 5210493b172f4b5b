"""Ingredient comparison and My Bar inventory edits.

Everything here is a plain function over explicit data. Inventories are
tuples of raw ingredient strings in the order the user added them.
"""
from typing import Iterable, List, Tuple
from mixmaster.models import RecipeRecord

Inventory = Tuple[str, ...]

def normalize_ingredient(raw: str) -> str:
    """Comparison key for an ingredient name, never shown to the user"""
    return raw.strip().lower()

def missing_ingredients(recipe: RecipeRecord, inventory: Iterable[str]) -> List[str]:
    """Recipe ingredient names, in recipe order, that the inventory does not cover"""
    on_hand = {normalize_ingredient(item) for item in inventory}
    return [name for name in recipe.ingredient_names
            if normalize_ingredient(name) not in on_hand]

def can_make(recipe: RecipeRecord, inventory: Iterable[str]) -> bool:
    """True when every ingredient of the recipe is in the inventory.

    A recipe with no listed ingredients is always makeable.
    """
    return not missing_ingredients(recipe, inventory)

def _is_blank(name: str) -> bool:
    return not name or not name.strip()

def toggle_inventory_item(inventory: Inventory, name: str) -> Inventory:
    """Remove `name` if present by exact match, otherwise append it.

    Matching is exact on purpose: toggling "gin" does not remove "Gin",
    even though both count as the same ingredient for can_make.
    """
    if _is_blank(name):
        return inventory
    if name in inventory:
        return tuple(item for item in inventory if item != name)
    return inventory + (name,)

def add_inventory_item(inventory: Inventory, name: str) -> Inventory:
    """Append a trimmed ingredient unless it is blank or already on hand (case-insensitively)"""
    if _is_blank(name):
        return inventory
    key = normalize_ingredient(name)
    if any(normalize_ingredient(item) == key for item in inventory):
        return inventory
    return inventory + (name.strip(),)

def remove_inventory_item(inventory: Inventory, name: str) -> Inventory:
    if _is_blank(name) or name not in inventory:
        return inventory
    return tuple(item for item in inventory if item != name)
