"""Load orchestration: fetch, normalise, rank and hold presentation state."""

from .controller import RankingController
from .models import DataSource, LoadResult

__all__ = [
    "RankingController",
    "LoadResult",
    "DataSource",
]
