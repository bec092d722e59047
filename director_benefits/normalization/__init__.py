"""Normalization layer: from arbitrary API payloads to CanonicalRecord models.

This module provides:
- extract_records: locate the raw record list inside a payload envelope
- resolve_alias / FieldAliases: first-match field resolution across key variants
- to_number: lenient numeric coercion with a NaN "not available" sentinel
- calculate_total_benefits: layered total-benefits derivation
- RecordNormalizer: raw record to CanonicalRecord
"""

from .aliases import MISSING, FieldAliases, resolve_alias
from .coercion import to_number
from .extraction import extract_records
from .models import NormalizationResult
from .service import RecordNormalizer, filter_directors, is_director_role
from .totals import calculate_total_benefits

__all__ = [
    "RecordNormalizer",
    "NormalizationResult",
    "extract_records",
    "filter_directors",
    "is_director_role",
    "calculate_total_benefits",
    "to_number",
    "resolve_alias",
    "FieldAliases",
    "MISSING",
]
