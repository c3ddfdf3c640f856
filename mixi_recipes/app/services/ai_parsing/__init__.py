"""AI recipe parsing package.

This package turns free-form LLM output into validated cocktail recipes:
JSON extraction and repair, key normalization, merging, a markdown fallback,
and measurement formatting.
"""

from mixi_recipes.app.services.ai_parsing.brace_extractor import extract_json_chunks
from mixi_recipes.app.services.ai_parsing.chunk_parser import (
    parse_chunk,
    parse_chunks,
    parse_document,
    repair_json,
)
from mixi_recipes.app.services.ai_parsing.exceptions import (
    RecipeParsingError,
    RecipeValidationError,
)
from mixi_recipes.app.services.ai_parsing.key_normalizer import (
    classify_orphan,
    clean_key,
    normalize_keys,
)
from mixi_recipes.app.services.ai_parsing.markdown_parser import parse_markdown_recipes
from mixi_recipes.app.services.ai_parsing.measurements import (
    format_amount,
    format_measurement,
    normalize_ingredient_measurement,
    normalize_unit,
)
from mixi_recipes.app.services.ai_parsing.models import (
    ChunkOutcome,
    Ingredient,
    OrphanClass,
    ParseResult,
    Recipe,
    SkipReason,
)
from mixi_recipes.app.services.ai_parsing.recipe_merger import merge_recipe_objects
from mixi_recipes.app.services.ai_parsing.recipe_parser import (
    parse_recipes_from_ai,
    parse_recipes_from_ai_timed,
)
from mixi_recipes.app.services.ai_parsing.schema_validator import coerce_recipe, validate_recipes

__all__ = [
    # Models
    "ChunkOutcome",
    "Ingredient",
    "OrphanClass",
    "ParseResult",
    "Recipe",
    "SkipReason",
    # Errors
    "RecipeParsingError",
    "RecipeValidationError",
    # Pipeline stages
    "extract_json_chunks",
    "parse_chunk",
    "parse_chunks",
    "parse_document",
    "repair_json",
    "classify_orphan",
    "clean_key",
    "normalize_keys",
    "merge_recipe_objects",
    "parse_markdown_recipes",
    "coerce_recipe",
    "validate_recipes",
    # Measurements
    "format_amount",
    "format_measurement",
    "normalize_ingredient_measurement",
    "normalize_unit",
    # Entry points
    "parse_recipes_from_ai",
    "parse_recipes_from_ai_timed",
]
