from decimal import Decimal
from typing import Optional

NUMBER_WORDS = {
    "a": Decimal(1),
    "an": Decimal(1),
    "one": Decimal(1),
    "two": Decimal(2),
    "three": Decimal(3),
    "four": Decimal(4),
    "half": Decimal("0.5"),
}

RANGE_SEPARATORS = (" to ", "-", "–")


def _parse_fraction(value: str) -> Optional[Decimal]:
    num_str, denom_str = value.split("/", 1)
    denom = Decimal(denom_str)
    if denom == 0:
        return None
    return Decimal(num_str) / denom


def _parse_single(value: str) -> Optional[Decimal]:
    """Parse "2", "0.75", "3/4" or a mixed number such as "1 1/2"."""
    parts = value.split(" ")
    try:
        if len(parts) == 2 and "/" in parts[1] and "/" not in parts[0]:
            fraction = _parse_fraction(parts[1])
            return None if fraction is None else Decimal(parts[0]) + fraction
        if len(parts) != 1:
            return None
        if "/" in value:
            return _parse_fraction(value)
        return Decimal(value)
    except (ArithmeticError, ValueError):
        return None


def parse_quantity_display(raw: Optional[str]) -> Optional[Decimal]:
    """Parse an ASCII display quantity ("2", "0.75", "1 1/2", "1-2", "a") into a Decimal.

    Ranges resolve to their upper bound. Returns None for anything else.
    """
    if raw is None:
        return None
    value = " ".join(raw.strip().lower().split())
    if not value:
        return None

    if value in NUMBER_WORDS:
        return NUMBER_WORDS[value]

    for sep in RANGE_SEPARATORS:
        if sep in value:
            value = value.rsplit(sep, 1)[1].strip()
            break

    if not value or not (value[0].isdigit() or value[0] == "."):
        return None
    result = _parse_single(value)
    if result is None or not result.is_finite():
        return None
    return result
