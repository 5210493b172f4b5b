import asyncio
from typing import Dict, List, Sequence

import pytest

from mixmaster.exceptions import NetworkError
from mixmaster.models import AlcoholicFlag, IngredientLine, RecipeRecord
from mixmaster.services.recipe_source import RecipeSource


def make_recipe(
    recipe_id: str,
    name: str = None,
    flag: AlcoholicFlag = AlcoholicFlag.ALCOHOLIC,
    ingredients: Sequence[str] = (),
    category: str = "Cocktail",
) -> RecipeRecord:
    return RecipeRecord(
        id=recipe_id,
        name=name or f"Drink {recipe_id}",
        category=category,
        alcoholic_flag=flag,
        alcoholic_label=flag.value,
        ingredient_lines=tuple(IngredientLine(name=i) for i in ingredients),
        instructions="Stir and serve.",
    )


class FakeRecipeSource(RecipeSource):
    """In-memory source that records every call"""

    def __init__(self, catalog: Sequence[RecipeRecord] = (), failing_terms: Sequence[str] = ()):
        self.catalog = list(catalog)
        self.failing_terms = set(failing_terms)
        self.calls: List[tuple] = []

    async def fetch_all(self) -> List[RecipeRecord]:
        self.calls.append(("fetch_all",))
        if "" in self.failing_terms:
            raise NetworkError("catalog unavailable")
        return list(self.catalog)

    async def search_by_term(self, term: str) -> List[RecipeRecord]:
        self.calls.append(("search_by_term", term))
        if term in self.failing_terms:
            raise NetworkError(f"search for {term} failed")
        return [r for r in self.catalog if term.lower() in r.name.lower()]


class GatedRecipeSource(RecipeSource):
    """Source whose lookups only resolve when the test opens their gate"""

    def __init__(self):
        self.gates: Dict[str, asyncio.Event] = {}
        self.results: Dict[str, object] = {}

    def gate(self, term: str) -> asyncio.Event:
        return self.gates.setdefault(term, asyncio.Event())

    def resolve(self, term: str, result):
        self.results[term] = result
        self.gate(term).set()

    async def fetch_all(self) -> List[RecipeRecord]:
        return await self.search_by_term("")

    async def search_by_term(self, term: str) -> List[RecipeRecord]:
        await self.gate(term).wait()
        result = self.results[term]
        if isinstance(result, Exception):
            raise result
        return list(result)


@pytest.fixture
def gin_and_tonic():
    return make_recipe("A", "Gin and Tonic", AlcoholicFlag.ALCOHOLIC, ["Gin", "Tonic"])


@pytest.fixture
def soda_water():
    return make_recipe("B", "Soda Water", AlcoholicFlag.NON_ALCOHOLIC, ["Soda"])


@pytest.fixture
def catalog(gin_and_tonic, soda_water):
    return [
        gin_and_tonic,
        soda_water,
        make_recipe("C", "Margarita", AlcoholicFlag.ALCOHOLIC, ["Tequila", "Triple sec", "Lime juice"]),
        make_recipe("D", "Mystery Punch", AlcoholicFlag.UNKNOWN, ["Rum"]),
        make_recipe("E", "Marshmallow Milk", AlcoholicFlag.OPTIONAL, ["Milk"]),
    ]
