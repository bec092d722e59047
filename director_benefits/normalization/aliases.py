"""Alias tables and the first-match resolver for raw record fields.

Upstream records name the same logical field in many ways ("name",
"fullName", "Employee Name", ...). Each logical field has an ordered list
of exact-cased aliases, tried first, and a list of lower-cased aliases
matched against the record's keys case-insensitively.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

MISSING = object()


@dataclass(frozen=True)
class FieldAliases:
    """Ordered aliases for one logical field.

    Attributes:
        exact: Keys matched as-is, in priority order
        lowered: Lower-cased keys matched against the lower-cased record keys
    """

    exact: Tuple[str, ...]
    lowered: Tuple[str, ...] = ()


NAME_ALIASES = FieldAliases(
    exact=("name", "fullName", "directorName", "employeeName"),
    lowered=("name", "employee name"),
)

ROLE_ALIASES = FieldAliases(
    exact=("role", "position", "jobTitle", "employmentTitle", "occupation"),
    lowered=("role", "employment"),
)

SALARY_ALIASES = FieldAliases(
    exact=("salary", "employmentIncome", "cash", "pay"),
    lowered=("salary", "cash"),
)

ALLOWANCES_ALIASES = FieldAliases(
    exact=("allowances", "benefitsinKind", "expenses"),
    lowered=("allowances", "benefits"),
)

TAX_NUMBER_ALIASES = FieldAliases(
    exact=("taxNumber", "taxReference", "nino", "niNumber", "taxId"),
)

EMPLOYEE_NUMBER_ALIASES = FieldAliases(
    exact=("employeeNumber", "payrollNumber", "reference", "employeeId"),
)

# Explicit total fields, in priority order
TOTAL_BENEFITS_FIELDS = (
    "totalBenefits",
    "totalBenefit",
    "total",
    "benefitTotal",
    "benefits",
    "cashEquivalent",
    "cashEquivalentBenefits",
    "cashbenefit",
    "cash_value",
    "cashValue",
    "otherBenefits",
)


def is_truthy(value: Any) -> bool:
    """Truthiness used for alias matching.

    Empty strings, zero, None, False and NaN do not count as a resolved value.
    Containers always do, even when empty.
    """
    if isinstance(value, (list, tuple, dict)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def lowercase_keys(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Map lower-cased keys to values; on collision the later key wins."""
    return {str(key).lower(): value for key, value in record.items()}


def first_match(*strategies: Callable[[], Any]) -> Any:
    """Evaluate strategies in order and return the first result that is not MISSING."""
    for strategy in strategies:
        result = strategy()
        if result is not MISSING:
            return result
    return MISSING


def _probe(mapping: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        value = mapping.get(key)
        if is_truthy(value):
            return value
    return MISSING


def resolve_alias(
    record: Mapping[str, Any],
    aliases: FieldAliases,
    lowered: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Resolve a logical field from a raw record.

    Args:
        record: Raw record
        aliases: Aliases for the field
        lowered: Pre-computed lowercase_keys(record), built on demand if omitted

    Returns:
        The first truthy value found, or MISSING
    """
    return first_match(
        lambda: _probe(record, aliases.exact),
        lambda: _probe(
            lowered if lowered is not None else lowercase_keys(record),
            aliases.lowered,
        ),
    )


def resolve_or_default(
    record: Mapping[str, Any],
    aliases: FieldAliases,
    default: Any,
    lowered: Optional[Mapping[str, Any]] = None,
) -> Any:
    """resolve_alias() with a fallback value for unresolved fields."""
    value = resolve_alias(record, aliases, lowered)
    return default if value is MISSING else value


def first_present(record: Mapping[str, Any], keys: Iterable[str]) -> Any:
    """Return the value of the first key present with a non-None value.

    Unlike resolve_alias(), falsy values such as 0 or "" count as present.
    """
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return MISSING
