from typing import Any, Dict, List, Optional
from mixmaster.config import config
from mixmaster.exceptions import ResponseParseError
from mixmaster.models import AlcoholicFlag, IngredientLine, RecipeRecord
from mixmaster.utils import logger

class DrinksParser:
    """Turns TheCocktailDB search payloads into RecipeRecords"""
    
    def __init__(self, max_slots: int = None):
        self.max_slots = max_slots or config.MAX_INGREDIENT_SLOTS
        
    def parse_response(self, response_data: Any) -> List[RecipeRecord]:
        if not isinstance(response_data, dict):
            raise ResponseParseError(f"Expected a JSON object, got {type(response_data).__name__}")
        
        # No matches comes back as {"drinks": null}
        drinks = response_data.get('drinks')
        if drinks is None:
            return []
        if not isinstance(drinks, list):
            raise ResponseParseError(f"'drinks' should be a list, got {type(drinks).__name__}")
        
        recipes = []
        for drink in drinks:
            recipe = self._extract_recipe(drink)
            if recipe:
                recipes.append(recipe)
        
        logger.info(f"Parsed {len(recipes)} recipes from drinks response")
        return recipes
    
    def _extract_recipe(self, drink: Any) -> Optional[RecipeRecord]:
        if not isinstance(drink, dict):
            logger.warning(f"Skipping drink entry that is not an object: {drink!r}")
            return None
        
        drink_id = drink.get('idDrink')
        if drink_id in (None, ''):
            logger.warning(f"Skipping drink without idDrink: {drink.get('strDrink')!r}")
            return None
        
        alcoholic_label = drink.get('strAlcoholic') or ''
        
        return RecipeRecord(
            id=str(drink_id),
            name=self._text(drink.get('strDrink')),
            category=self._text(drink.get('strCategory')),
            alcoholic_flag=AlcoholicFlag.from_label(alcoholic_label),
            alcoholic_label=alcoholic_label,
            image_ref=self._text(drink.get('strDrinkThumb')),
            ingredient_lines=tuple(self._extract_ingredient_lines(drink)),
            instructions=self._text(drink.get('strInstructions')),
            glass=drink.get('strGlass') or None,
        )
    
    def _extract_ingredient_lines(self, drink: Dict) -> List[IngredientLine]:
        lines = []
        for slot in range(1, self.max_slots + 1):
            name = drink.get(f'strIngredient{slot}')
            # Absent slots are skipped, never treated as an empty ingredient
            if not name or not isinstance(name, str):
                continue
            
            measure = drink.get(f'strMeasure{slot}')
            lines.append(IngredientLine(name=name, measure=measure if isinstance(measure, str) else ''))
        return lines
    
    def _text(self, value: Any) -> str:
        if value is None:
            return ''
        return str(value)
