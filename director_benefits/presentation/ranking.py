"""Dataset ranking and display sorting."""

import math
from functools import cmp_to_key
from typing import Any, Iterable, List, Optional, Sequence

from director_benefits.config.models import DEFAULT_TOP_LIMIT
from director_benefits.domain.models import CanonicalRecord
from director_benefits.normalization.coercion import to_number

from .formatting import format_currency, format_value
from .models import TableRow


def rank_by_total(records: Iterable[CanonicalRecord]) -> List[CanonicalRecord]:
    """Order records by total benefits, highest first (stable for ties)."""
    return sorted(records, key=lambda record: record.total_benefits, reverse=True)


def compare_values(value_a: Any, value_b: Any) -> int:
    """Display comparator for two field values.

    Two values that both coerce to finite numbers compare numerically,
    larger first. Anything else compares on the case-folded formatted text,
    alphabetically.
    """
    number_a = to_number(value_a)
    number_b = to_number(value_b)

    if math.isfinite(number_a) and math.isfinite(number_b):
        if number_a == number_b:
            return 0
        return -1 if number_a > number_b else 1

    text_a = format_value(value_a).casefold()
    text_b = format_value(value_b).casefold()
    if text_a == text_b:
        return 0
    return -1 if text_a < text_b else 1


def sort_for_display(
    records: Sequence[CanonicalRecord],
    sort_field: str,
    limit: Optional[int] = DEFAULT_TOP_LIMIT,
) -> List[CanonicalRecord]:
    """Sort records on a field for display and keep the top ``limit``.

    The sort is stable: records comparing equal keep their relative order.

    Args:
        records: Current dataset
        sort_field: Key in CanonicalRecord.as_fields()
        limit: Maximum records returned (None for all)

    Returns:
        New sorted list; the input is not modified
    """
    keyed = [(record.get(sort_field), record) for record in records]
    keyed.sort(key=cmp_to_key(lambda a, b: compare_values(a[0], b[0])))
    ordered = [record for _, record in keyed]
    return ordered if limit is None else ordered[:limit]


def build_rows(
    records: Sequence[CanonicalRecord],
    dimension_field: str,
    sort_field: str,
    limit: Optional[int] = DEFAULT_TOP_LIMIT,
) -> List[TableRow]:
    """Sort, cut to the top ``limit`` and format the table rows.

    The dimension cell falls back to the display name for records that do
    not carry the selected dimension field.
    """
    rows = []
    for rank, record in enumerate(sort_for_display(records, sort_field, limit), start=1):
        fields = record.as_fields()
        dimension_value = fields.get(dimension_field)
        if dimension_value is None:
            dimension_value = record.display_name

        rows.append(
            TableRow(
                rank=rank,
                dimension_value=format_value(dimension_value),
                total_benefits=format_currency(record.total_benefits),
                salary=format_currency(record.salary),
                allowances=format_currency(record.allowances),
                tax_number=format_value(record.tax_number),
                employee_number=format_value(record.employee_number),
            )
        )
    return rows
