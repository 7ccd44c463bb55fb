"""
Byte size units.

Parses "100 KB" style budget labels into byte counts and renders measured
byte counts back in a rule's unit.
"""

import math
import re
from typing import Dict, Tuple

from sizeguard.exceptions import InvalidSizeError


DENOMINATIONS: Dict[str, int] = {
    "B": 1,
    "KB": 1024,
    "MB": 1024 * 1024,
    "GB": 1024 * 1024 * 1024,
}

_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([A-Za-z]+)\s*$")


def _js_number(value: float) -> str:
    """Render a float the way JavaScript prints numbers (1.0 -> "1")."""
    if value == int(value):
        return str(int(value))
    return repr(value)


def format_size(num_bytes: int, unit: str) -> str:
    """
    Format a byte count in the given unit, rounded to two decimals.

    Args:
        num_bytes: Size in bytes
        unit: Key of DENOMINATIONS

    Returns:
        Formatted string like "1.5KB" or "1200B"
    """
    try:
        denominator = DENOMINATIONS[unit]
    except KeyError:
        raise ValueError(f"Unknown size unit: {unit!r}") from None
    # Math.round semantics: halves round towards +infinity
    rounded = math.floor(num_bytes / denominator * 100 + 0.5) / 100
    return f"{_js_number(rounded)}{unit}"


def parse_size(value: str) -> Tuple[int, str]:
    """
    Parse a budget label such as "100 KB" or "1.5MB".

    Returns:
        Tuple of (size in bytes, canonical unit)

    Raises:
        InvalidSizeError: If the label is malformed or the unit is unknown
    """
    if not isinstance(value, str):
        raise InvalidSizeError(str(value), "expected a string like '100 KB'")

    match = _SIZE_RE.match(value)
    if not match:
        raise InvalidSizeError(value, "expected '<number> <unit>'")

    number, unit = match.groups()
    unit = unit.upper()
    if unit not in DENOMINATIONS:
        supported = ", ".join(DENOMINATIONS)
        raise InvalidSizeError(value, f"unknown unit '{match.group(2)}' (supported: {supported})")

    return int(float(number) * DENOMINATIONS[unit]), unit
