"""Decimal-to-fraction display and unit tidying for bar measurements."""

import math
import re

from mixi_recipes.app.services.ai_parsing.constants import (
    DECIMAL_TO_FRACTION,
    FRACTION_TOLERANCE,
    PLURAL_UNITS,
    REMAINDER_FRACTIONS,
    UNIT_STANDARDIZATION,
)
from mixi_recipes.app.services.ai_parsing.models import Ingredient
from mixi_recipes.app.services.ai_parsing.parsing_utils import normalize_fraction_display
from mixi_recipes.app.services.quantity_parser import parse_quantity_display

_NUMERIC_LEAD_RE = re.compile(r"^[\d.]")


def format_amount(amount: str) -> str:
    """Convert a decimal amount to the fraction a bartender would write.

    "0.75" -> "3/4", "1.5" -> "1 1/2", "2" -> "2". Words, fractions and
    decimals with no close fraction come back unchanged.
    """
    if not amount or not amount.strip():
        return amount
    value_str = amount.strip()
    if "/" in value_str or " " in value_str:
        return amount
    if not _NUMERIC_LEAD_RE.match(value_str):
        return amount
    try:
        value = float(value_str)
    except ValueError:
        return amount
    if not math.isfinite(value):
        return amount

    exact = DECIMAL_TO_FRACTION.get(value_str)
    if exact:
        return exact

    # Absorb float drift such as 0.7499999
    for decimal, fraction in DECIMAL_TO_FRACTION.items():
        if abs(float(decimal) - value) < FRACTION_TOLERANCE:
            return fraction

    if value.is_integer():
        return str(int(value))

    whole = math.floor(value)
    remainder = value - whole
    for targets, fraction in REMAINDER_FRACTIONS:
        if any(abs(remainder - target) < FRACTION_TOLERANCE for target in targets):
            return f"{whole} {fraction}" if whole > 0 else fraction

    return amount


def normalize_unit(unit: str) -> str:
    """Standardize long unit names to bar shorthand ("ounces" -> "oz")."""
    token = " ".join((unit or "").lower().split())
    return UNIT_STANDARDIZATION.get(token, token)


def pluralize_unit(unit: str, amount: str) -> str:
    plural = PLURAL_UNITS.get((unit or "").strip().lower())
    if plural is None:
        return unit
    numeric = parse_quantity_display(normalize_fraction_display(amount))
    if numeric is None or numeric == 1:
        return unit
    return plural


def format_measurement(amount: str, unit: str) -> str:
    """Render an amount and unit for display, e.g. ("0.75", "oz") -> "3/4 oz"."""
    formatted = format_amount(amount) or ""
    unit = pluralize_unit(unit or "", amount)
    return " ".join(part for part in (formatted.strip(), unit.strip()) if part)


def normalize_ingredient_measurement(ingredient: Ingredient) -> Ingredient:
    """Return a copy of the ingredient with a fraction quantity and tidy unit."""
    quantity = normalize_fraction_display(ingredient.quantity) or ""
    unit = normalize_unit(ingredient.unit)
    return ingredient.model_copy(
        update={"quantity": format_amount(quantity), "unit": pluralize_unit(unit, quantity)}
    )
