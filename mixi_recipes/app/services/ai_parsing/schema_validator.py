"""Final gate: coerce candidate recipes into validated Recipe models."""

import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from mixi_recipes.app.services.ai_parsing.constants import INGREDIENT_MARKER_KEYS
from mixi_recipes.app.services.ai_parsing.exceptions import RecipeValidationError
from mixi_recipes.app.services.ai_parsing.ingredient_parser import (
    parse_ingredient_line,
    split_quantity_unit,
)
from mixi_recipes.app.services.ai_parsing.models import Ingredient, Recipe, SkipReason
from mixi_recipes.app.services.ai_parsing.parsing_utils import (
    clean_text,
    split_lines,
    split_tags,
    strip_numbering,
)

logger = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return clean_text(value)
    return ""


def _optional_text(value: Any) -> Optional[str]:
    if isinstance(value, list):
        value = ", ".join(_as_text(v) for v in value if _as_text(v))
    return _as_text(value) or None


def _coerce_ingredient(entry: Any) -> Optional[Ingredient]:
    if isinstance(entry, str):
        data = parse_ingredient_line(entry)
    elif isinstance(entry, dict):
        item = entry.get("item") or entry.get("name") or entry.get("ingredients") or entry.get("text")
        data = {
            "quantity": _as_text(entry.get("quantity")),
            "unit": _as_text(entry.get("unit")),
            "item": _as_text(item),
            "notes": _as_text(entry.get("notes")) or None,
        }
        if data["quantity"] and not data["unit"]:
            data["quantity"], data["unit"] = split_quantity_unit(data["quantity"])
    else:
        return None

    if not data["item"]:
        logger.debug("Dropping ingredient without an item: %r", entry)
        return None
    try:
        return Ingredient(**data)
    except ValidationError as exc:
        logger.debug("Dropping invalid ingredient %r: %s", entry, exc)
        return None


def _coerce_ingredients(value: Any) -> List[Ingredient]:
    if isinstance(value, str):
        value = value.splitlines()
    elif isinstance(value, dict):
        if INGREDIENT_MARKER_KEYS & value.keys():
            value = [value]
        else:
            # {"Gin": "2 oz", "Lime juice": "3/4 oz"}
            value = [
                dict(zip(("quantity", "unit"), split_quantity_unit(_as_text(qty))), item=item)
                for item, qty in value.items()
            ]
    if not isinstance(value, list):
        return []
    ingredients = []
    for entry in value:
        ingredient = _coerce_ingredient(entry)
        if ingredient is not None:
            ingredients.append(ingredient)
    return ingredients


def _coerce_instructions(value: Any) -> List[str]:
    if isinstance(value, str):
        return split_lines(value)
    if not isinstance(value, list):
        return []
    steps: List[str] = []
    for entry in value:
        if isinstance(entry, dict):
            entry = entry.get("text") or entry.get("instructions") or entry.get("description")
        text = strip_numbering(entry) if isinstance(entry, str) else ""
        if text:
            steps.append(text)
    return steps


def _coerce_tags(value: Any) -> List[str]:
    if isinstance(value, str):
        return split_tags(value)
    if not isinstance(value, list):
        return []
    return [tag for tag in (_as_text(v) for v in value) if tag]


def _skip(reason: SkipReason, detail: str) -> None:
    logger.debug("Dropping recipe (%s): %s", reason.value, detail)


def coerce_recipe(candidate: Any) -> Optional[Recipe]:
    """Coerce one candidate into a Recipe, or return None when it must be dropped."""
    if not isinstance(candidate, dict):
        _skip(SkipReason.NOT_AN_OBJECT, type(candidate).__name__)
        return None
    name = candidate.get("name")
    if not isinstance(name, str) or not name.strip():
        _skip(SkipReason.MISSING_NAME, repr(name)[:80])
        return None

    try:
        return Recipe(
            name=clean_text(name),
            description=_optional_text(candidate.get("description")),
            ingredients=_coerce_ingredients(candidate.get("ingredients")),
            instructions=_coerce_instructions(candidate.get("instructions")),
            glassware=_optional_text(candidate.get("glassware")),
            garnish=_optional_text(candidate.get("garnish")),
            tags=_coerce_tags(candidate.get("tags")),
        )
    except ValidationError as exc:
        logger.debug("Recipe %r failed validation: %s", name, exc)
        return None


def validate_recipes(candidate: Any) -> List[Recipe]:
    """Validate a ``{"recipes": [...]}`` candidate, dropping recipes that do not conform.

    Raises RecipeValidationError only when the candidate is not a mapping.
    """
    if not isinstance(candidate, dict):
        raise RecipeValidationError(
            f"Expected a JSON object with a recipes list, got {type(candidate).__name__}"
        )
    raw_recipes = candidate.get("recipes")
    if not isinstance(raw_recipes, list):
        return []
    recipes = []
    for raw in raw_recipes:
        recipe = coerce_recipe(raw)
        if recipe is not None:
            recipes.append(recipe)
    return recipes
