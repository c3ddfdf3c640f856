"""Merge normalized objects into one de-duplicated recipe list."""

import logging
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


def dedup_key(name: str) -> str:
    return name.strip().lower()


def _candidate_recipes(obj: Any) -> List[Any]:
    if not isinstance(obj, dict):
        return []
    for field in ("recipes", "recipe"):
        value = obj.get(field)
        if isinstance(value, list):
            return value
        if isinstance(value, dict):
            return [value]
    if isinstance(obj.get("name"), str):
        return [obj]
    return []


def merge_recipe_objects(objects: List[Any]) -> Dict[str, List[Dict[str, Any]]]:
    """Flatten every object's recipes, keeping the first recipe seen per name."""
    seen = set()
    recipes: List[Dict[str, Any]] = []
    for obj in objects:
        for candidate in _candidate_recipes(obj):
            if not isinstance(candidate, dict):
                continue
            name = candidate.get("name")
            if not isinstance(name, str) or not name.strip():
                continue
            key = dedup_key(name)
            if key in seen:
                logger.debug("Dropping duplicate recipe %r", name)
                continue
            seen.add(key)
            recipes.append(candidate)
    return {"recipes": recipes}
