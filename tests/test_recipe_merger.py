from mixi_recipes.app.services.ai_parsing import merge_recipe_objects
from mixi_recipes.app.services.ai_parsing.recipe_merger import dedup_key


def test_dedup_key():
    assert dedup_key("  MarGarita ") == "margarita"


def test_merge_first_occurrence_wins_and_order_kept():
    merged = merge_recipe_objects(
        [
            {"recipes": [{"name": "Margarita", "garnish": "salt"}, {"name": "Negroni"}]},
            {"recipes": [{"name": " margarita ", "garnish": "none"}, {"name": "Paloma"}]},
        ]
    )
    assert [r["name"] for r in merged["recipes"]] == ["Margarita", "Negroni", "Paloma"]
    assert merged["recipes"][0]["garnish"] == "salt"


def test_merge_single_recipe_shapes():
    merged = merge_recipe_objects(
        [
            {"name": "Gimlet", "ingredients": []},
            {"recipe": {"name": "Sidecar"}},
            {"recipe": [{"name": "Aviation"}]},
        ]
    )
    assert [r["name"] for r in merged["recipes"]] == ["Gimlet", "Sidecar", "Aviation"]


def test_merge_skips_unusable_candidates():
    merged = merge_recipe_objects(
        [
            "not an object",
            {"recipes": ["string", {"name": "  "}, {"name": 5}, {"description": "nameless"}]},
            {"unrelated": True},
        ]
    )
    assert merged == {"recipes": []}
