from typing import Tuple

def toggle_favorite(favorite_ids: Tuple[str, ...], recipe_id: str) -> Tuple[str, ...]:
    """Star or unstar a recipe id; ids are opaque and matched exactly"""
    if recipe_id in favorite_ids:
        return tuple(fav for fav in favorite_ids if fav != recipe_id)
    return favorite_ids + (recipe_id,)
