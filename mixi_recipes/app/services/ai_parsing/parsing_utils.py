"""General text helpers for AI recipe parsing."""

import re
from decimal import Context, Decimal
from typing import List, Optional

from mixi_recipes.app.services.ai_parsing.constants import COMMON_UNITS, FRACTION_CHARS, FRACTION_MAP

_ATTACHED_FRACTION_RE = re.compile(rf"(\d)([{FRACTION_CHARS}])")
_PLAIN_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
_NUMBERING_RE = re.compile(
    r"^\s*(?:step\s*\d+\s*[:.)-]?|\d+\s*[.)](?=\s|$)|[-•*+](?=\s|$))\s*", re.I
)


def clean_text(text: Optional[str]) -> str:
    """Normalize whitespace in text."""
    return re.sub(r"\s+", " ", text or "").strip()


def normalize_unit_token(unit: str) -> str:
    """Normalize a unit token for comparison."""
    token = unit.lower().strip(".,")
    if token in COMMON_UNITS:
        return token
    if token.endswith("es") and token[:-2] in COMMON_UNITS:
        return token[:-2]
    if token.endswith("s"):
        token = token[:-1]
    return token


def is_known_unit(unit: str) -> bool:
    """Check if a unit string is a recognized bar unit."""
    return normalize_unit_token(unit) in COMMON_UNITS


def normalize_fraction_display(qty: Optional[str]) -> Optional[str]:
    """Rewrite unicode vulgar fractions as ASCII and tidy spacing, e.g. "1½" -> "1 1/2"."""
    if not qty:
        return qty
    text = _ATTACHED_FRACTION_RE.sub(r"\1 \2", qty)
    text = clean_text("".join(FRACTION_MAP.get(ch, ch) for ch in text))
    if _PLAIN_NUMBER_RE.fullmatch(text):
        # "02" -> "2", "0.50" -> "0.5"
        text = format(Decimal(text).normalize(Context(prec=len(text))), "f")
    return text


def strip_numbering(line: str) -> str:
    """Drop a leading "1.", "1)", "Step 1:" or bullet marker."""
    return clean_text(_NUMBERING_RE.sub("", line, count=1))


def split_lines(text: str) -> List[str]:
    return [line for line in (strip_numbering(part) for part in text.splitlines()) if line]


def split_tags(text: str) -> List[str]:
    return [tag for tag in (clean_text(part).lstrip("#") for part in text.split(",")) if tag]
