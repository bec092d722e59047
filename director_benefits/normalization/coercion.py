"""Lenient numeric coercion for benefit amounts.

Source data carries amounts as numbers or as display strings such as
"£325,000" or " 1,250.50 ". Strings are reduced to digits, '.' and '-'
and the leading numeric prefix is parsed, so currency symbols, thousands
separators and stray whitespace are tolerated without a locale parser.
"""

import math
import re
from typing import Any

from director_benefits.domain.models import NOT_AVAILABLE

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")
_NUMERIC_PREFIX = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def to_number(value: Any) -> float:
    """Coerce a raw value to a float.

    Args:
        value: Raw field value

    Returns:
        The numeric value, or NOT_AVAILABLE (NaN) when value is neither a
        number nor a string with numeric content. Values beyond float range
        come back as +/-inf.

    Examples:
        >>> to_number("£325,000")
        325000.0
        >>> math.isnan(to_number("n/a"))
        True
    """
    # bool is an int subclass but never an amount
    if isinstance(value, bool):
        return NOT_AVAILABLE

    if isinstance(value, float):
        return value

    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            # JSON integers are unbounded; past float range they read as infinite
            return math.inf if value > 0 else -math.inf

    if isinstance(value, str):
        cleaned = _NON_NUMERIC.sub("", value)
        match = _NUMERIC_PREFIX.match(cleaned)
        if not match:
            return NOT_AVAILABLE
        return float(match.group(0))

    return NOT_AVAILABLE


def is_available(value: float) -> bool:
    """True when value is a finite number (not the NaN sentinel or infinite)."""
    return math.isfinite(value)


def or_zero(value: float) -> float:
    """Replace NaN and infinities with 0."""
    return value if math.isfinite(value) else 0.0
