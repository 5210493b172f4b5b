from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

class AlcoholicFlag(Enum):
    ALCOHOLIC = "Alcoholic"
    NON_ALCOHOLIC = "Non alcoholic"
    OPTIONAL = "Optional alcohol"
    UNKNOWN = "Unknown"
    
    @classmethod
    def from_label(cls, label: Optional[str]) -> "AlcoholicFlag":
        """Resolve the upstream strAlcoholic text, UNKNOWN for anything unrecognized"""
        if not isinstance(label, str):
            return cls.UNKNOWN
        
        key = label.strip().lower()
        for flag in (cls.ALCOHOLIC, cls.NON_ALCOHOLIC, cls.OPTIONAL):
            if flag.value.lower() == key:
                return flag
        return cls.UNKNOWN

@dataclass(frozen=True)
class IngredientLine:
    name: str
    measure: str = ""  # Free text, e.g. "1 1/2 oz"

@dataclass(frozen=True)
class RecipeRecord:
    id: str
    name: str
    category: str = ""  # Cocktail, Shot, Ordinary Drink, etc.
    alcoholic_flag: AlcoholicFlag = AlcoholicFlag.UNKNOWN
    alcoholic_label: str = ""  # Raw upstream text, kept for display
    image_ref: str = ""
    ingredient_lines: Tuple[IngredientLine, ...] = field(default_factory=tuple)
    instructions: str = ""
    glass: Optional[str] = None
    
    @property
    def ingredient_names(self) -> List[str]:
        return [line.name for line in self.ingredient_lines]
