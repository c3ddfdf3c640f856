"""Tolerant multi-recipe parser for LLM output.

Runs the JSON path first (whole-document parse, else brace extraction with
per-chunk repair), normalizes keys, merges and de-duplicates recipes, and
only falls back to the markdown lexer when the JSON path found nothing.
Every returned ingredient has its quantity and unit normalized for display.
"""

import logging
import time
from typing import Any, List, Tuple

from mixi_recipes.app.core.config import get_settings
from mixi_recipes.app.services.ai_parsing.brace_extractor import extract_json_chunks
from mixi_recipes.app.services.ai_parsing.chunk_parser import parse_chunk_outcomes, parse_document
from mixi_recipes.app.services.ai_parsing.key_normalizer import normalize_keys
from mixi_recipes.app.services.ai_parsing.markdown_parser import parse_markdown_recipes
from mixi_recipes.app.services.ai_parsing.measurements import normalize_ingredient_measurement
from mixi_recipes.app.services.ai_parsing.models import ParseResult, Recipe
from mixi_recipes.app.services.ai_parsing.recipe_merger import merge_recipe_objects
from mixi_recipes.app.services.ai_parsing.schema_validator import validate_recipes

logger = logging.getLogger(__name__)


def _collect_json_objects(raw_text: str, lenient: bool, warnings: List[str]) -> List[Any]:
    objects = parse_document(raw_text)
    if objects:
        return objects
    outcomes = parse_chunk_outcomes(extract_json_chunks(raw_text), lenient=lenient)
    for outcome in outcomes:
        if not outcome.ok:
            warnings.append(f"Skipped JSON chunk {outcome.index}: {outcome.skip_reason.value}")
    return [outcome.value for outcome in outcomes if outcome.ok]


def _normalize_measurements(recipe: Recipe) -> Recipe:
    return recipe.model_copy(
        update={"ingredients": [normalize_ingredient_measurement(i) for i in recipe.ingredients]}
    )


def parse_recipes_from_ai(raw_text: str) -> ParseResult:
    """Extract every recoverable recipe from raw LLM text.

    Never raises for malformed text; returns an empty result when nothing is
    recoverable. Raises TypeError when ``raw_text`` is not a string.
    """
    if not isinstance(raw_text, str):
        raise TypeError(f"raw_text must be a str, got {type(raw_text).__name__}")

    settings = get_settings()
    warnings: List[str] = []
    strategy = None

    objects = _collect_json_objects(
        raw_text, settings.recipe_parser_lenient_repair_enabled, warnings
    )
    merged = merge_recipe_objects([normalize_keys(obj) for obj in objects])

    if merged["recipes"]:
        recipes = validate_recipes(merged)
        dropped = len(merged["recipes"]) - len(recipes)
        if dropped:
            warnings.append(f"Dropped {dropped} recipe(s) that failed validation")
        strategy = "json"
    elif settings.recipe_parser_markdown_fallback_enabled:
        recipes = parse_markdown_recipes(raw_text)
        strategy = "markdown"
    else:
        recipes = []

    recipes = [_normalize_measurements(recipe) for recipe in recipes]
    if not recipes:
        strategy = None
        if raw_text.strip():
            logger.warning(
                "No recipes recovered from LLM output (preview=%r)", raw_text[:200]
            )

    logger.info(
        "Parsed %d recipe(s) from LLM output via %s", len(recipes), strategy or "nothing"
    )
    return ParseResult(recipes=recipes, strategy=strategy, warnings=warnings)


def parse_recipes_from_ai_timed(raw_text: str) -> Tuple[ParseResult, float]:
    """Parse and report elapsed wall time in milliseconds."""
    start = time.perf_counter()
    result = parse_recipes_from_ai(raw_text)
    return result, (time.perf_counter() - start) * 1000
