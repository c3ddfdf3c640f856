import json
import random

import pytest

from mixi_recipes.app.services.ai_parsing import ParseResult, parse_recipes_from_ai

SAMPLE_DOCUMENT = json.dumps(
    {
        "recipes": [
            {
                "name": "Gimlet",
                "ingredients": [
                    {"quantity": "2", "unit": "oz", "item": "Gin"},
                    {"quantity": "0.75", "unit": "oz", "item": "Lime juice"},
                ],
                "instructions": ["Shake", "Strain"],
                "tags": ["sour"],
            },
            {"name": "Daiquiri", "ingredients": ["2 oz rum", "1 oz lime"], "instructions": "Shake"},
        ]
    },
    indent=2,
)

FUZZ_TOKENS = [
    "{", "}", "[", "]", '"', ":", ",", "\n", " ", "\\", "name", "recipes", "ingredients",
    "instructions", "-", "#", "**", "1.", "0.75", "oz", "dash", "Gin", "½", "\x00", "```", "---",
    "Ingredients:", "Instructions:", "### ", "_", "(", ")", "é", "\t",
]


def _assert_well_formed(result):
    assert isinstance(result, ParseResult)
    assert all(recipe.name.strip() for recipe in result.recipes)
    assert all(ingredient.item.strip() for recipe in result.recipes for ingredient in recipe.ingredients)


@pytest.mark.parametrize(
    "raw",
    [
        '{"a":' * 5000 + "1" + "}" * 5000,
        "[" * 5000,
        "{" * 5000,
        "}" * 5000 + "{" * 5000,
        '{"recipes": [' + "[" * 800 + "]" * 800 + "]}",
        '"' * 101,
        '{"name": "unterminated',
        '{"name": "Gimlet", "ingredients": [{"item": "Gin"}',
        '{"name": ["not", "a", "string"], "ingredients": {"quantity": {}}}',
        '{"recipes": {"name": "Gimlet", "ingredients": {"Gin": {"nested": true}}}}',
        '{"name": "Gimlet", "ingredients": [{"quantity": "9e999999 9e999999/1", "unit": "dash", "item": "x"}]}',
        "```json\n```",
        "\x00\x01\x02\x1f",
        "### \n---\n***\n___",
        "1.\n2)\n- \n**Ingredients**\n",
        "Ingredients:\n\n\nInstructions:\n\n",
        '﻿{"name": "Gimlet"}',
        "Name:\nIngredients (serves 2):\n- ½ oz\n",
        "\n" * 1000,
        "a" * 100_000,
    ],
)
def test_adversarial_input_never_raises(raw):
    _assert_well_formed(parse_recipes_from_ai(raw))


@pytest.mark.parametrize("cut", range(0, len(SAMPLE_DOCUMENT), 17))
def test_truncated_document_never_raises(cut):
    _assert_well_formed(parse_recipes_from_ai(SAMPLE_DOCUMENT[:cut]))


@pytest.mark.parametrize("seed", range(50))
def test_random_token_soup_never_raises(seed):
    rng = random.Random(seed)
    raw = "".join(rng.choice(FUZZ_TOKENS) for _ in range(rng.randint(1, 120)))
    _assert_well_formed(parse_recipes_from_ai(raw))


@pytest.mark.parametrize("seed", range(20))
def test_shuffled_document_lines_never_raise(seed):
    lines = SAMPLE_DOCUMENT.splitlines()
    random.Random(seed).shuffle(lines)
    _assert_well_formed(parse_recipes_from_ai("\n".join(lines)))


def test_complete_document_survives_surrounding_noise():
    raw = 'Sure "thing" here:\n' + SAMPLE_DOCUMENT + "\n}} trailing ]] noise {"
    result = parse_recipes_from_ai(raw)
    assert [r.name for r in result.recipes][:1] == ["Gimlet"]
