"""Data models for the normalization layer."""

from dataclasses import dataclass, field
from typing import List

from director_benefits.domain.models import CanonicalRecord


@dataclass
class NormalizationResult:
    """Outcome of normalising one extracted batch.

    Attributes:
        records: Every record that normalised, directors and non-directors
        rejected_count: Raw elements that were not mappings
    """

    records: List[CanonicalRecord] = field(default_factory=list)
    rejected_count: int = 0

    @property
    def directors(self) -> List[CanonicalRecord]:
        """Records classified as directors, in input order."""
        return [record for record in self.records if record.is_director]

    @property
    def total_count(self) -> int:
        """Number of raw elements seen."""
        return len(self.records) + self.rejected_count
