"""Record normalisation service.

Turns one raw record of arbitrary shape into a CanonicalRecord:
1. Resolves name, role and identifiers through the alias tables
2. Classifies director status from the role text
3. Coerces salary and allowances to numbers
4. Derives total benefits (see totals.py)
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional

from director_benefits.domain.models import PLACEHOLDER, CanonicalRecord
from director_benefits.logging import get_logger

from .aliases import (
    ALLOWANCES_ALIASES,
    EMPLOYEE_NUMBER_ALIASES,
    MISSING,
    NAME_ALIASES,
    ROLE_ALIASES,
    SALARY_ALIASES,
    TAX_NUMBER_ALIASES,
    lowercase_keys,
    resolve_alias,
    resolve_or_default,
)
from .coercion import NOT_AVAILABLE, to_number
from .models import NormalizationResult
from .totals import calculate_total_benefits

logger = get_logger(__name__, component="normalization")

DIRECTOR_KEYWORD = "director"
DEFAULT_DISPLAY_NAME = "Director"


def is_director_role(role: Any) -> bool:
    """True when role is a string containing 'director' (case-insensitive)."""
    return isinstance(role, str) and DIRECTOR_KEYWORD in role.lower()


def filter_directors(records: Iterable[Optional[CanonicalRecord]]) -> List[CanonicalRecord]:
    """Drop rejected (None) and non-director records, keeping order."""
    return [record for record in records if record is not None and record.is_director]


class RecordNormalizer:
    """Normalises raw benefit records into CanonicalRecord models.

    Non-director records are normalised too; filtering happens one stage
    later so the classification can be inspected and tested on its own.
    """

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        self.logger = logger_instance or logger

    def normalize(self, raw: Any) -> Optional[CanonicalRecord]:
        """Normalise a single raw record.

        Args:
            raw: One element of the extracted record list

        Returns:
            CanonicalRecord, or None when raw is not a mapping. Missing or
            unparseable fields never cause a rejection; they resolve to
            defaults instead.
        """
        if not isinstance(raw, Mapping):
            return None

        record = dict(raw)
        lowered = lowercase_keys(record)

        role = resolve_or_default(record, ROLE_ALIASES, "", lowered)
        is_director = is_director_role(role)
        role_raw = role if isinstance(role, str) else str(role)

        name = resolve_alias(record, NAME_ALIASES, lowered)
        if name is MISSING:
            display_name = role_raw or DEFAULT_DISPLAY_NAME
        else:
            display_name = str(name)

        salary = self._resolve_amount(record, SALARY_ALIASES, lowered)
        allowances = self._resolve_amount(record, ALLOWANCES_ALIASES, lowered)
        total_benefits = calculate_total_benefits(record, salary, allowances)

        return CanonicalRecord(
            display_name=display_name,
            is_director=is_director,
            role_raw=role_raw,
            salary=salary,
            allowances=allowances,
            total_benefits=total_benefits,
            tax_number=str(resolve_or_default(record, TAX_NUMBER_ALIASES, PLACEHOLDER)),
            employee_number=str(resolve_or_default(record, EMPLOYEE_NUMBER_ALIASES, PLACEHOLDER)),
            raw=record,
        )

    def normalize_batch(self, raw_records: Iterable[Any]) -> NormalizationResult:
        """Normalise every element of an extracted record list.

        Non-mapping elements are counted and skipped; they never abort
        the batch.

        Args:
            raw_records: Output of extract_records()

        Returns:
            NormalizationResult with the normalised records and rejection count
        """
        result = NormalizationResult()

        for index, raw in enumerate(raw_records):
            record = self.normalize(raw)
            if record is None:
                result.rejected_count += 1
                self.logger.debug(
                    "Skipping raw element that is not a record",
                    extra={
                        "event": "normalization.record.rejected",
                        "index": index,
                        "value_type": type(raw).__name__,
                    },
                )
                continue
            result.records.append(record)

        self.logger.info(
            f"Normalized {len(result.records)} records "
            f"({len(result.directors)} directors, {result.rejected_count} rejected)",
            extra={
                "event": "normalization.batch.completed",
                "record_count": len(result.records),
                "director_count": len(result.directors),
                "rejected_count": result.rejected_count,
            },
        )

        return result

    @staticmethod
    def _resolve_amount(record, aliases, lowered) -> float:
        value = resolve_alias(record, aliases, lowered)
        if value is MISSING:
            return NOT_AVAILABLE
        return to_number(value)
