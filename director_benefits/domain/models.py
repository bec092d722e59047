"""Core domain model for normalised benefit records.

- CanonicalRecord: one benefit record after normalisation, immutable
"""

import math
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Shown for identifiers that could not be resolved from the raw record
PLACEHOLDER = "–"

# "Not available" sentinel for salary/allowances
NOT_AVAILABLE = float("nan")


class CanonicalRecord(BaseModel):
    """Normalised benefit record.

    Holds the derived fields alongside the raw record they were computed
    from. Attribute names are snake_case; the camelCase aliases are the
    keys exposed by as_fields(), which is what the presentation layer
    reads dimensions and sort fields from.

    total_benefits is validated to be finite and non-negative, so every
    record in a dataset has a usable ranking key.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={"example": {
            "displayName": "Amelia Clarke",
            "isDirector": True,
            "roleRaw": "Executive Director",
            "salary": 325000,
            "allowances": 58000,
            "totalBenefits": 412000,
            "taxNumber": "TN-102938",
            "employeeNumber": "EMP-8821",
        }},
    )

    display_name: str = Field("Director", alias="displayName", description="Name shown in the table")
    is_director: bool = Field(..., alias="isDirector", description="Role contains 'director'")
    role_raw: str = Field("", alias="roleRaw", description="Role/title as received")
    salary: float = Field(NOT_AVAILABLE, description="Salary, NaN when not available")
    allowances: float = Field(NOT_AVAILABLE, description="Allowances, NaN when not available")
    total_benefits: float = Field(..., alias="totalBenefits", description="Ranking metric")
    tax_number: str = Field(PLACEHOLDER, alias="taxNumber", description="Tax reference")
    employee_number: str = Field(PLACEHOLDER, alias="employeeNumber", description="Payroll number")
    raw: Dict[str, Any] = Field(default_factory=dict, exclude=True, description="Original raw fields")

    @field_validator("total_benefits")
    @classmethod
    def validate_total_benefits(cls, v: float) -> float:
        """Reject NaN, infinities and negative totals."""
        if not math.isfinite(v) or v < 0:
            raise ValueError(f"total_benefits must be finite and non-negative, got: {v}")
        return v

    def as_fields(self) -> Dict[str, Any]:
        """Raw fields merged with the derived fields.

        Derived fields win on key collision; raw key order is kept and
        derived keys not present in the raw record are appended.
        """
        return {**self.raw, **self.model_dump(by_alias=True)}

    def get(self, key: str, default: Any = None) -> Any:
        """Look a field up by its merged-view key (e.g. ``totalBenefits``)."""
        return self.as_fields().get(key, default)
