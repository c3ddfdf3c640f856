#!/usr/bin/env python
"""
Step through the AI recipe parser on a captured LLM response.

Run manually:
    python scripts/debug_recipe_parser.py response.txt
    pbpaste | python scripts/debug_recipe_parser.py
"""
import json
import logging
import sys

from mixi_recipes.app.core.config import get_settings
from mixi_recipes.app.services.ai_parsing import (
    extract_json_chunks,
    merge_recipe_objects,
    normalize_keys,
    parse_recipes_from_ai_timed,
)
from mixi_recipes.app.services.ai_parsing.chunk_parser import parse_chunk_outcomes

logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger("debug_recipe_parser")


def read_input(argv: list[str]) -> str:
    if len(argv) > 1:
        with open(argv[1], encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def main() -> int:
    raw = read_input(sys.argv)
    logger.info("Input length: %d chars", len(raw))

    chunks = extract_json_chunks(raw)
    logger.info("Found %d JSON chunk(s)", len(chunks))

    outcomes = parse_chunk_outcomes(chunks)
    for outcome in outcomes:
        if outcome.ok:
            logger.info("Chunk %d parsed (repaired=%s)", outcome.index, outcome.repaired)
        else:
            logger.info("Chunk %d skipped: %s", outcome.index, outcome.skip_reason.value)

    normalized = [normalize_keys(outcome.value) for outcome in outcomes if outcome.ok]
    for idx, obj in enumerate(normalized):
        logger.info("Normalized object %d keys: %s", idx, sorted(obj.keys()))

    merged = merge_recipe_objects(normalized)
    logger.info("Merged recipe names: %s", [r.get("name") for r in merged["recipes"]])

    result, elapsed_ms = parse_recipes_from_ai_timed(raw)
    logger.info(
        "Final: %d recipe(s) via %s in %.1f ms",
        len(result.recipes),
        result.strategy or "nothing",
        elapsed_ms,
    )
    print(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
    return 0 if result.recipes else 1


if __name__ == "__main__":
    sys.exit(main())
