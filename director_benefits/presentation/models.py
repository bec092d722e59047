"""View models handed from the controller to renderers."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class Option:
    """One selectable control option.

    Attributes:
        value: Field key in CanonicalRecord.as_fields()
        label: Human-readable label
    """

    value: str
    label: str


@dataclass
class ControlState:
    """Dimension and sort selections plus the options they were chosen from."""

    dimension_options: List[Option] = field(default_factory=list)
    sort_options: List[Option] = field(default_factory=list)
    dimension: Optional[str] = None
    sort_field: Optional[str] = None

    def has_dimension(self, key: Optional[str]) -> bool:
        return any(option.value == key for option in self.dimension_options)

    def has_sort_field(self, key: Optional[str]) -> bool:
        return any(option.value == key for option in self.sort_options)

    @property
    def dimension_label(self) -> str:
        """Label of the selected dimension; "Director" when nothing is selected."""
        for option in self.dimension_options:
            if option.value == self.dimension:
                return option.label
        return "Director"

    @property
    def sort_label(self) -> str:
        for option in self.sort_options:
            if option.value == self.sort_field:
                return option.label
        return "Total benefits"


@dataclass(frozen=True)
class TableRow:
    """One rendered row of the ranking table (all cells pre-formatted)."""

    rank: int
    dimension_value: str
    total_benefits: str
    salary: str
    allowances: str
    tax_number: str
    employee_number: str


@dataclass(frozen=True)
class StatusMessage:
    """Status banner text; is_error selects the error style."""

    text: str
    is_error: bool = False


@dataclass
class TableView:
    """Everything a renderer needs to draw the ranking table."""

    status: StatusMessage
    dimension_label: str
    sort_label: str
    rows: List[TableRow]
    generated_at: datetime
