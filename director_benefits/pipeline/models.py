"""Data models for load tracking and reporting."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class DataSource(str, Enum):
    """Where the current dataset came from."""

    LIVE = "live"
    FALLBACK = "fallback"


@dataclass
class LoadResult:
    """
    Outcome of one load_data() call.

    Attributes:
        load_started_at: When the load began
        load_finished_at: When the load completed
        source: Dataset origin (None when the load was skipped)
        extracted_count: Raw elements extracted from the live payload
        rejected_count: Extracted elements that were not records
        director_count: Director records in the resulting dataset
        error_message: Failure that triggered the fallback, if any
        skipped: True when another load was already in progress
        duration_seconds: Wall time of the load
    """

    load_started_at: datetime
    load_finished_at: datetime
    source: Optional[DataSource] = None
    extracted_count: int = 0
    rejected_count: int = 0
    director_count: int = 0
    error_message: Optional[str] = None
    skipped: bool = False
    duration_seconds: float = 0.0

    def __post_init__(self):
        if self.duration_seconds == 0.0:
            delta = self.load_finished_at - self.load_started_at
            self.duration_seconds = delta.total_seconds()

    @property
    def used_fallback(self) -> bool:
        return self.source == DataSource.FALLBACK
