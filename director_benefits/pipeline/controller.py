"""Load orchestration and presentation state."""

import threading
from datetime import datetime
from typing import Callable, List, Optional, Sequence, Tuple
from uuid import uuid4

from director_benefits.client import BenefitsClient, ClientError, EmptyPayloadError
from director_benefits.config.models import AppConfig, DisplayConfig
from director_benefits.data.fallback import get_fallback_records
from director_benefits.domain.models import CanonicalRecord
from director_benefits.logging import get_logger
from director_benefits.logging.context import log_context
from director_benefits.normalization import RecordNormalizer, extract_records, filter_directors
from director_benefits.normalization.extraction import DEFAULT_EMBEDDED_RESOURCE
from director_benefits.presentation.controls import populate_controls
from director_benefits.presentation.models import ControlState, StatusMessage, TableRow, TableView
from director_benefits.presentation.ranking import build_rows, rank_by_total

from .models import DataSource, LoadResult

logger = get_logger(__name__, component="controller")

LOADING_MESSAGE = "Loading data from HMRC..."
REFRESHING_MESSAGE = "Refreshing data from HMRC..."
LIVE_MESSAGE = "Showing live HMRC data fetched at {time}."
FALLBACK_MESSAGE = (
    "Unable to fetch live HMRC data. Showing a recent example dataset "
    "so you can explore the interface."
)


class RankingController:
    """
    Owns the dataset and control selections behind the ranking table.

    load_data() fetches, normalises, filters and ranks the live payload,
    switching to the bundled example dataset on any failure. The dataset
    and control state are replaced wholesale on every load, never patched
    in place. Only one load runs at a time; a trigger arriving while a
    load is in progress is skipped rather than queued.
    """

    def __init__(
        self,
        client: BenefitsClient,
        normalizer: Optional[RecordNormalizer] = None,
        display_config: Optional[DisplayConfig] = None,
        embedded_resource: str = DEFAULT_EMBEDDED_RESOURCE,
        fallback_loader: Callable[[], List[CanonicalRecord]] = get_fallback_records,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the controller.

        Args:
            client: Benefits API client
            normalizer: Record normaliser (a default instance if omitted)
            display_config: Table settings (defaults if omitted)
            embedded_resource: Collection name probed under '_embedded'
            fallback_loader: Returns the example dataset
            clock: Current local time, used in status messages
        """
        self.client = client
        self.normalizer = normalizer or RecordNormalizer()
        self.display_config = display_config or DisplayConfig()
        self.embedded_resource = embedded_resource
        self.fallback_loader = fallback_loader
        self.clock = clock

        self._lock = threading.Lock()
        self._dataset: Tuple[CanonicalRecord, ...] = ()
        self._controls = ControlState()
        self._status = StatusMessage("")
        self._is_loading = False

    @classmethod
    def from_config(cls, app_config: AppConfig) -> "RankingController":
        """Build a controller and its client from application configuration."""
        return cls(
            client=BenefitsClient.from_config(app_config.api),
            display_config=app_config.display,
            embedded_resource=app_config.api.embedded_resource,
        )

    @property
    def dataset(self) -> Tuple[CanonicalRecord, ...]:
        """Current director records, highest total benefits first."""
        return self._dataset

    @property
    def controls(self) -> ControlState:
        return self._controls

    @property
    def status(self) -> StatusMessage:
        return self._status

    @property
    def is_loading(self) -> bool:
        """True while a load is in progress (the refresh control is disabled)."""
        return self._is_loading

    def load_data(self, force_refresh: bool = False) -> LoadResult:
        """
        Fetch live data, or fall back to the example dataset, and replace the dataset.

        Args:
            force_refresh: True for a user-triggered refresh (affects status text only)

        Returns:
            LoadResult describing where the dataset came from. Failures are
            reported through the result and the status message; nothing is raised.
        """
        load_started_at = self.clock()

        if not self._lock.acquire(blocking=False):
            logger.warning(
                "Load skipped: previous load still in progress",
                extra={"event": "controller.load.skipped", "reason": "lock_held"},
            )
            return LoadResult(
                load_started_at=load_started_at,
                load_finished_at=self.clock(),
                skipped=True,
            )

        try:
            with log_context(load_id=uuid4().hex, trigger="refresh" if force_refresh else "initial"):
                self._is_loading = True
                self._status = StatusMessage(REFRESHING_MESSAGE if force_refresh else LOADING_MESSAGE)

                logger.info(
                    "Load started",
                    extra={"event": "controller.load.started", "url": self.client.url},
                )

                try:
                    result = self._load_live(load_started_at)
                except ClientError as e:
                    result = self._load_fallback(load_started_at, e)
                except Exception as e:
                    logger.error(
                        f"Unexpected error while loading live data: {e}",
                        extra={"event": "controller.load.error", "error_type": type(e).__name__},
                        exc_info=True,
                    )
                    result = self._load_fallback(load_started_at, e)

                logger.info(
                    "Load completed",
                    extra={
                        "event": "controller.load.completed",
                        "source": result.source.value,
                        "director_count": result.director_count,
                        "duration_ms": int(result.duration_seconds * 1000),
                    },
                )
                return result
        finally:
            self._is_loading = False
            self._lock.release()

    def _load_live(self, load_started_at: datetime) -> LoadResult:
        payload = self.client.fetch_payload()
        raw_records = extract_records(payload, self.embedded_resource)

        if not raw_records:
            raise EmptyPayloadError("HMRC API returned no usable records.")

        normalized = self.normalizer.normalize_batch(raw_records)
        if not normalized.records:
            raise EmptyPayloadError("HMRC API returned no usable records.")

        directors = rank_by_total(filter_directors(normalized.records))
        self._hydrate(directors)

        fetched_at = self.clock()
        self._status = StatusMessage(LIVE_MESSAGE.format(time=fetched_at.strftime("%H:%M:%S")))

        return LoadResult(
            load_started_at=load_started_at,
            load_finished_at=fetched_at,
            source=DataSource.LIVE,
            extracted_count=len(raw_records),
            rejected_count=normalized.rejected_count,
            director_count=len(directors),
        )

    def _load_fallback(self, load_started_at: datetime, error: Exception) -> LoadResult:
        logger.warning(
            f"Falling back to example dataset: {error}",
            extra={
                "event": "controller.load.fallback",
                "error_type": type(error).__name__,
                "error": str(error),
            },
        )

        records = rank_by_total(self.fallback_loader())
        self._hydrate(records)
        self._status = StatusMessage(FALLBACK_MESSAGE, is_error=True)

        return LoadResult(
            load_started_at=load_started_at,
            load_finished_at=self.clock(),
            source=DataSource.FALLBACK,
            director_count=len(records),
            error_message=str(error),
        )

    def _hydrate(self, records: Sequence[CanonicalRecord]) -> None:
        self._dataset = tuple(records)
        self._controls = populate_controls(
            self._dataset,
            previous=self._controls,
            default_dimension=self.display_config.default_dimension,
            default_sort=self.display_config.default_sort,
        )

    def select_dimension(self, key: str) -> None:
        """Select the dimension column.

        Raises:
            ValueError: If key is not one of the current dimension options
        """
        if not self._controls.has_dimension(key):
            available = ", ".join(option.value for option in self._controls.dimension_options)
            raise ValueError(f"Unknown dimension '{key}'. Available: {available or 'none'}")
        self._controls.dimension = key

    def select_sort(self, key: str) -> None:
        """Select the sort field.

        Raises:
            ValueError: If key is not one of the current sort options
        """
        if not self._controls.has_sort_field(key):
            available = ", ".join(option.value for option in self._controls.sort_options)
            raise ValueError(f"Unknown sort field '{key}'. Available: {available or 'none'}")
        self._controls.sort_field = key

    def render_table(self) -> List[TableRow]:
        """Rows for the current dataset and selections, top ``top_limit`` only."""
        if not self._dataset:
            return []

        return build_rows(
            self._dataset,
            dimension_field=self._controls.dimension or "displayName",
            sort_field=self._controls.sort_field or "totalBenefits",
            limit=self.display_config.top_limit,
        )

    def build_view(self) -> TableView:
        """Snapshot of status, labels and rows for a renderer."""
        return TableView(
            status=self._status,
            dimension_label=self._controls.dimension_label,
            sort_label=self._controls.sort_label,
            rows=self.render_table(),
            generated_at=self.clock(),
        )
