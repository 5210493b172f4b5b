from .recipe import AlcoholicFlag, IngredientLine, RecipeRecord
from .state import ActiveFilter, ActiveTab, BrowserState

__all__ = ["AlcoholicFlag", "IngredientLine", "RecipeRecord", "ActiveFilter", "ActiveTab", "BrowserState"]
