import pytest

from mixmaster.exceptions import ResponseParseError
from mixmaster.models import AlcoholicFlag, IngredientLine
from mixmaster.parsers.drinks_parser import DrinksParser

MARGARITA = {
    "idDrink": "11007",
    "strDrink": "Margarita",
    "strCategory": "Ordinary Drink",
    "strAlcoholic": "Alcoholic",
    "strGlass": "Cocktail glass",
    "strInstructions": "Rub the rim of the glass with the lime slice.",
    "strDrinkThumb": "https://www.thecocktaildb.com/images/media/drink/5noda61589575158.jpg",
    "strIngredient1": "Tequila",
    "strIngredient2": "Triple sec",
    "strIngredient3": "Lime juice",
    "strIngredient4": "Salt",
    "strIngredient5": None,
    "strMeasure1": "1 1/2 oz ",
    "strMeasure2": "1/2 oz ",
    "strMeasure3": "1 oz ",
    "strMeasure4": None,
    "strMeasure5": None,
}


@pytest.fixture
def parser():
    return DrinksParser()


def test_parses_recipe_fields(parser):
    [recipe] = parser.parse_response({"drinks": [MARGARITA]})

    assert recipe.id == "11007"
    assert recipe.name == "Margarita"
    assert recipe.category == "Ordinary Drink"
    assert recipe.alcoholic_flag == AlcoholicFlag.ALCOHOLIC
    assert recipe.alcoholic_label == "Alcoholic"
    assert recipe.glass == "Cocktail glass"
    assert recipe.image_ref.endswith(".jpg")
    assert recipe.ingredient_lines == (
        IngredientLine("Tequila", "1 1/2 oz "),
        IngredientLine("Triple sec", "1/2 oz "),
        IngredientLine("Lime juice", "1 oz "),
        IngredientLine("Salt", ""),
    )


@pytest.mark.parametrize("payload", [{"drinks": None}, {}])
def test_null_or_missing_drinks_means_no_results(parser, payload):
    assert parser.parse_response(payload) == []


def test_absent_ingredient_slots_are_skipped(parser):
    drink = {
        "idDrink": "1",
        "strDrink": "Gappy",
        "strIngredient1": "Gin",
        "strIngredient2": None,
        "strIngredient3": "",
        "strIngredient4": "Tonic",
        "strMeasure4": "4 oz",
    }
    [recipe] = parser.parse_response({"drinks": [drink]})
    assert recipe.ingredient_names == ["Gin", "Tonic"]
    assert recipe.ingredient_lines[1].measure == "4 oz"


def test_only_fifteen_slots_are_read(parser):
    drink = {"idDrink": "2", "strDrink": "Kitchen Sink"}
    for slot in range(1, 17):
        drink[f"strIngredient{slot}"] = f"Thing {slot}"
    [recipe] = parser.parse_response({"drinks": [drink]})
    assert len(recipe.ingredient_lines) == 15
    assert recipe.ingredient_names[-1] == "Thing 15"


@pytest.mark.parametrize(
    "label, flag",
    [
        ("Alcoholic", AlcoholicFlag.ALCOHOLIC),
        ("Non alcoholic", AlcoholicFlag.NON_ALCOHOLIC),
        ("Optional alcohol", AlcoholicFlag.OPTIONAL),
        (" non ALCOHOLIC ", AlcoholicFlag.NON_ALCOHOLIC),
        ("Non-Alcoholic-ish", AlcoholicFlag.UNKNOWN),
        (None, AlcoholicFlag.UNKNOWN),
    ],
)
def test_alcoholic_flag_resolution(parser, label, flag):
    [recipe] = parser.parse_response({"drinks": [{"idDrink": "3", "strAlcoholic": label}]})
    assert recipe.alcoholic_flag == flag


def test_missing_optional_fields_default(parser):
    [recipe] = parser.parse_response({"drinks": [{"idDrink": 42}]})
    assert recipe.id == "42"
    assert recipe.instructions == ""
    assert recipe.glass is None
    assert recipe.ingredient_lines == ()


def test_entries_without_id_are_skipped(parser):
    drinks = [{"strDrink": "Nameless"}, "garbage", MARGARITA]
    assert [r.id for r in parser.parse_response({"drinks": drinks})] == ["11007"]


@pytest.mark.parametrize("payload", [[], "drinks", {"drinks": "none"}, {"drinks": {"idDrink": "1"}}])
def test_malformed_payloads_raise(parser, payload):
    with pytest.raises(ResponseParseError):
        parser.parse_response(payload)
