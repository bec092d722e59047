"""Display formatting for amounts and table cells (en-GB conventions)."""

import math
from typing import Any

from director_benefits.domain.models import PLACEHOLDER
from director_benefits.normalization.coercion import to_number

CURRENCY_SYMBOL = "£"


def format_currency(value: Any) -> str:
    """Format an amount as whole pounds, e.g. ``£412,000``.

    Unavailable, non-numeric and zero amounts render as the placeholder dash.
    """
    number = to_number(value)
    if not math.isfinite(number) or number == 0:
        return PLACEHOLDER

    sign = "-" if number < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(number):,.0f}"


def format_number(value: float) -> str:
    """Thousands-separated number with at most three decimals."""
    value = to_number(value)
    if not math.isfinite(value):
        return PLACEHOLDER
    if value.is_integer():
        return f"{value:,.0f}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_value(value: Any) -> str:
    """Format an arbitrary field value for a table cell."""
    if value is None or value == "":
        return PLACEHOLDER
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)
