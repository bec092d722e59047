"""Total-benefits derivation.

The upstream schema is not stable, so the total is derived in layers:

1. The first explicit total field present on the record (TOTAL_BENEFITS_FIELDS
   order), used when it coerces to a finite, strictly positive number.
2. Otherwise the largest of salary, allowances and every numeric value on
   the record, which catches totals stored under unanticipated keys.
3. If that is not positive, salary + allowances with unavailable parts as 0.

The result is always finite and never negative.
"""

import math
from typing import Any, Mapping

from .aliases import MISSING, TOTAL_BENEFITS_FIELDS, first_present
from .coercion import NOT_AVAILABLE, is_available, or_zero, to_number


def explicit_total(record: Mapping[str, Any]) -> float:
    """Coerced value of the first explicit total field, or NaN."""
    value = first_present(record, TOTAL_BENEFITS_FIELDS)
    if value is MISSING:
        return NOT_AVAILABLE
    return to_number(value)


def largest_numeric_value(record: Mapping[str, Any], salary: float, allowances: float) -> float:
    """Max over salary, allowances and all finite coercible record values.

    Salary and allowances fields are scanned again as ordinary record
    values. Returns NaN when the record has no finite coercible value.
    """
    numeric_values = [
        number for number in map(to_number, record.values()) if is_available(number)
    ]
    if not numeric_values:
        return NOT_AVAILABLE
    return max(or_zero(salary), or_zero(allowances), *numeric_values)


def calculate_total_benefits(record: Mapping[str, Any], salary: float, allowances: float) -> float:
    """Derive the total-benefits figure for a raw record.

    Args:
        record: Raw record
        salary: Resolved salary (NaN when not available)
        allowances: Resolved allowances (NaN when not available)

    Returns:
        Finite, non-negative total
    """
    total = explicit_total(record)
    if math.isfinite(total) and total > 0:
        return total

    total = largest_numeric_value(record, salary, allowances)
    if math.isfinite(total) and total > 0:
        return total

    total = or_zero(salary) + or_zero(allowances)
    if not math.isfinite(total) or total < 0:
        return 0.0
    return total
