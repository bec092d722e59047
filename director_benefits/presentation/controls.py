"""Dimension and sort control population.

Options are derived from the first record of the dataset: every
string or numeric field can be shown as the dimension column, and every
field holding a finite number can be sorted on.
"""

import math
import re
from typing import List, Optional, Sequence

from director_benefits.domain.models import CanonicalRecord
from director_benefits.normalization.coercion import to_number

from .models import ControlState, Option

RESERVED_PREFIX = "_"
EXCLUDED_FIELDS = frozenset({"isDirector", "totalBenefits"})
TOTAL_BENEFITS_OPTION = Option("totalBenefits", "Total benefits")

_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[_-]+")


def to_label(key: str) -> str:
    """Turn a field key into a label.

    Examples:
        >>> to_label("displayName")
        'Display Name'
        >>> to_label("cash_value")
        'Cash value'
    """
    label = _CASE_BOUNDARY.sub(r"\1 \2", key)
    label = _SEPARATORS.sub(" ", label)
    return label[:1].upper() + label[1:]


def _is_scalar(value) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def candidate_fields(records: Sequence[CanonicalRecord]) -> List[str]:
    """Selectable field keys of the first record, in field order."""
    if not records:
        return []

    sample = records[0].as_fields()
    return [
        key
        for key, value in sample.items()
        if not str(key).startswith(RESERVED_PREFIX)
        and _is_scalar(value)
        and key not in EXCLUDED_FIELDS
    ]


def build_dimension_options(records: Sequence[CanonicalRecord]) -> List[Option]:
    """Dimension options: every candidate field with its label."""
    return [Option(key, to_label(key)) for key in candidate_fields(records)]


def build_sort_options(records: Sequence[CanonicalRecord]) -> List[Option]:
    """Sort options: total benefits first, then candidate fields holding finite numbers."""
    if not records:
        return []

    sample = records[0].as_fields()
    options = [TOTAL_BENEFITS_OPTION]
    for key in candidate_fields(records):
        if math.isfinite(to_number(sample[key])):
            options.append(Option(key, to_label(key)))
    return options


def populate_controls(
    records: Sequence[CanonicalRecord],
    previous: Optional[ControlState] = None,
    default_dimension: str = "displayName",
    default_sort: str = "totalBenefits",
) -> ControlState:
    """Rebuild the control state for a freshly loaded dataset.

    A previous selection survives when its field is still offered. Otherwise
    the dimension falls back to default_dimension, then to the first option;
    the sort field falls back to default_sort, then to total benefits.

    Args:
        records: New dataset
        previous: Control state before the load, if any
        default_dimension: Preferred dimension when no previous selection applies
        default_sort: Preferred sort field when no previous selection applies

    Returns:
        New ControlState (empty options and no selection for an empty dataset)
    """
    if not records:
        return ControlState()

    state = ControlState(
        dimension_options=build_dimension_options(records),
        sort_options=build_sort_options(records),
    )

    previous_dimension = previous.dimension if previous else None
    if state.has_dimension(previous_dimension):
        state.dimension = previous_dimension
    elif state.has_dimension(default_dimension):
        state.dimension = default_dimension
    elif state.dimension_options:
        state.dimension = state.dimension_options[0].value

    previous_sort = previous.sort_field if previous else None
    if state.has_sort_field(previous_sort):
        state.sort_field = previous_sort
    elif state.has_sort_field(default_sort):
        state.sort_field = default_sort
    else:
        state.sort_field = TOTAL_BENEFITS_OPTION.value

    return state
