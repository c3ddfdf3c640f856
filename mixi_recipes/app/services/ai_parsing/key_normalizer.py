"""Rename LLM key variants to the canonical recipe vocabulary.

LLM output frequently leaks label text into key position ("Ingredients:",
"ingrédients", "Glass Type") or, after encoding damage, leaves keys that are
nothing but whitespace and punctuation. The first case is a table lookup on a
cleaned key. The second carries no signal in the key at all, so the value is
treated as an orphan and classified by its shape once the whole object has
been walked.
"""

import logging
from typing import Any, Dict, List, Optional

from mixi_recipes.app.services.ai_parsing.constants import (
    INGREDIENT_MARKER_KEYS,
    KEY_LOOKUP,
    MAX_NESTING_DEPTH,
)
from mixi_recipes.app.services.ai_parsing.models import OrphanClass, SkipReason

logger = logging.getLogger(__name__)


def clean_key(key: str) -> str:
    """Lowercase, trim and drop every non-alphanumeric character."""
    return "".join(ch for ch in key.strip().lower() if ch.isalnum())


def canonical_key(key: str) -> Optional[str]:
    """Return the canonical field for ``key``, or None when the table has no entry."""
    return KEY_LOOKUP.get(clean_key(key))


def classify_orphan(value: Any) -> OrphanClass:
    """Decide what an orphaned value most likely is from its shape alone."""
    if not isinstance(value, list) or not value:
        return OrphanClass.UNCLASSIFIED
    if all(isinstance(el, dict) and INGREDIENT_MARKER_KEYS & el.keys() for el in value):
        return OrphanClass.INGREDIENTS_LIKE
    if all(isinstance(el, str) for el in value):
        return OrphanClass.INSTRUCTIONS_LIKE
    return OrphanClass.UNCLASSIFIED


_ORPHAN_TARGETS = {
    OrphanClass.INGREDIENTS_LIKE: "ingredients",
    OrphanClass.INSTRUCTIONS_LIKE: "instructions",
}


def _normalize_object(obj: Dict[str, Any], depth: int) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    orphans: List[Any] = []

    for key, value in obj.items():
        normalized_value = normalize_keys(value, depth + 1)
        cleaned = clean_key(key)
        if not cleaned:
            orphans.append(normalized_value)
            continue
        target = KEY_LOOKUP.get(cleaned, key)
        if target in result:
            logger.debug("Ignoring duplicate key %r for field %r", key, target)
            continue
        result[target] = normalized_value

    for value in orphans:
        target = _ORPHAN_TARGETS.get(classify_orphan(value))
        if target is None:
            logger.debug("Dropping orphan (%s): %s", SkipReason.UNCLASSIFIED_ORPHAN.value, type(value).__name__)
            continue
        if target in result:
            logger.debug("Orphan looks like %s but the field is already set", target)
            continue
        result[target] = value

    return result


def normalize_keys(obj: Any, depth: int = 0) -> Any:
    """Recursively rewrite mapping keys into the canonical vocabulary.

    Returns new containers; the input is never modified. Containers nested
    deeper than ``MAX_NESTING_DEPTH`` are replaced by None.
    """
    if isinstance(obj, (dict, list)) and depth > MAX_NESTING_DEPTH:
        logger.debug("Dropping value (%s) at depth %d", SkipReason.TOO_DEEP.value, depth)
        return None
    if isinstance(obj, dict):
        return _normalize_object(obj, depth)
    if isinstance(obj, list):
        return [normalize_keys(item, depth + 1) for item in obj]
    return obj
