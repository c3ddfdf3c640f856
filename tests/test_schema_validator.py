import pytest

from mixi_recipes.app.services.ai_parsing import (
    RecipeParsingError,
    RecipeValidationError,
    coerce_recipe,
    validate_recipes,
)


def test_validate_recipes_requires_mapping():
    with pytest.raises(RecipeValidationError):
        validate_recipes(["not", "a", "mapping"])
    assert issubclass(RecipeValidationError, RecipeParsingError)
    assert issubclass(RecipeParsingError, ValueError)


def test_validate_recipes_without_list():
    assert validate_recipes({}) == []
    assert validate_recipes({"recipes": "Margarita"}) == []


def test_validate_recipes_drops_bad_entries():
    recipes = validate_recipes({"recipes": [{"name": "Gimlet"}, {"name": "  "}, "Sidecar"]})
    assert [r.name for r in recipes] == ["Gimlet"]


def test_coerce_ingredient_shapes():
    recipe = coerce_recipe(
        {
            "name": "Gimlet",
            "ingredients": [
                {"quantity": "2 oz", "item": "Gin"},
                {"quantity": 0.75, "unit": "oz", "item": "Lime juice", "notes": ""},
                {"quantity": "1"},
                "1 tsp sugar (optional)",
                42,
            ],
        }
    )
    assert [(i.quantity, i.unit, i.item, i.notes) for i in recipe.ingredients] == [
        ("2", "oz", "Gin", None),
        ("0.75", "oz", "Lime juice", None),
        ("1", "tsp", "sugar", "optional"),
    ]


def test_coerce_ingredient_mapping():
    recipe = coerce_recipe({"name": "Gimlet", "ingredients": {"Gin": "2 oz", "Lime juice": "3/4 oz"}})
    assert [(i.quantity, i.unit, i.item) for i in recipe.ingredients] == [
        ("2", "oz", "Gin"),
        ("3/4", "oz", "Lime juice"),
    ]


def test_coerce_ingredients_from_text_block():
    recipe = coerce_recipe({"name": "Gimlet", "ingredients": "2 oz gin\n0.75 oz lime juice"})
    assert [i.item for i in recipe.ingredients] == ["gin", "lime juice"]


@pytest.mark.parametrize(
    "instructions,expected",
    [
        ("1. Shake\n2. Strain", ["Shake", "Strain"]),
        ([{"text": "Shake"}, "Step 2: Strain", "", None], ["Shake", "Strain"]),
        (None, []),
    ],
)
def test_coerce_instructions(instructions, expected):
    assert coerce_recipe({"name": "Gimlet", "instructions": instructions}).instructions == expected


def test_coerce_scalars_and_tags():
    recipe = coerce_recipe(
        {
            "name": "  Gimlet  ",
            "description": "",
            "glassware": ["Coupe", "Nick and Nora"],
            "garnish": "Lime wheel",
            "tags": "classic, #sour",
        }
    )
    assert recipe.name == "Gimlet"
    assert recipe.description is None
    assert recipe.glassware == "Coupe, Nick and Nora"
    assert recipe.garnish == "Lime wheel"
    assert recipe.tags == ["classic", "sour"]


@pytest.mark.parametrize("candidate", [None, "Gimlet", {"name": None}, {"name": ""}, {"title": "Gimlet"}])
def test_coerce_recipe_rejects(candidate):
    assert coerce_recipe(candidate) is None
