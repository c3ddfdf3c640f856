"""Split free-text ingredient lines into quantity, unit, item and notes."""

import re
from typing import Dict, List, Optional, Tuple

from mixi_recipes.app.services.ai_parsing.parsing_utils import (
    clean_text,
    is_known_unit,
    normalize_fraction_display,
    strip_numbering,
)

_QTY_TOKEN_RE = re.compile(r"(?:\d+(?:\.\d+)?|\.\d+|\d+/\d+)(?:[-–](?:\d+(?:\.\d+)?|\d+/\d+))?")
_FRACTION_TOKEN_RE = re.compile(r"\d+/\d+")
_ATTACHED_UNIT_RE = re.compile(r"(\d+(?:\.\d+)?)([A-Za-z]+\.?)")
_NOTES_RE = re.compile(r"\s*\(([^)]*)\)\s*$")


def _take_quantity(tokens: List[str]) -> str:
    if not tokens:
        return ""
    attached = _ATTACHED_UNIT_RE.fullmatch(tokens[0])
    if attached and is_known_unit(attached.group(2)):
        # "30ml" -> "30", "ml"
        tokens[0:1] = [attached.group(1), attached.group(2)]
    if not _QTY_TOKEN_RE.fullmatch(tokens[0]):
        return ""
    qty = [tokens.pop(0)]
    if tokens and "/" not in qty[0] and _FRACTION_TOKEN_RE.fullmatch(tokens[0]):
        qty.append(tokens.pop(0))
    return " ".join(qty)


def _take_unit(tokens: List[str], has_quantity: bool) -> str:
    if len(tokens) < 2 or not is_known_unit(tokens[0]):
        return ""
    if not has_quantity and tokens[1].lower() != "of":
        return ""
    unit = tokens.pop(0).rstrip(".,")
    if len(tokens) > 1 and tokens[0].lower() == "of":
        tokens.pop(0)
    return unit


def parse_ingredient_line(line: str) -> Dict[str, Optional[str]]:
    """Parse "- 1 1/2 oz rye whiskey (high proof)" into its parts.

    The leading numeric token(s) are the quantity; the next token is the unit
    only when it is a known bar unit, otherwise it stays part of the item.
    """
    text = normalize_fraction_display(clean_text(strip_numbering(line))) or ""
    notes = None
    match = _NOTES_RE.search(text)
    if match and match.start() > 0:
        notes = clean_text(match.group(1)) or None
        text = text[: match.start()]

    tokens = text.split()
    quantity = _take_quantity(tokens)
    unit = _take_unit(tokens, bool(quantity))
    return {
        "quantity": quantity,
        "unit": unit,
        "item": clean_text(" ".join(tokens)).rstrip(",") if tokens else "",
        "notes": notes,
    }


def split_quantity_unit(qty: str) -> Tuple[str, str]:
    """Split a quantity like "2 oz" into ("2", "oz") when the trailing token is a known unit."""
    tokens = clean_text(normalize_fraction_display(qty)).split()
    numeric_tokens = []
    unit_token = ""
    for tok in tokens:
        if is_known_unit(tok):
            unit_token = tok.rstrip(".,")
            break
        numeric_tokens.append(tok)
    if not unit_token or not numeric_tokens:
        return qty, ""
    return " ".join(numeric_tokens), unit_token
