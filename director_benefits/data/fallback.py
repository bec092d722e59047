"""Example dataset shown when live HMRC data cannot be loaded.

The entries are already in canonical shape and are turned into
CanonicalRecord models directly, without passing through the normaliser.
"""

from typing import Any, Dict, List

from director_benefits.domain.models import CanonicalRecord

FALLBACK_ENTRIES: tuple = (
    {
        "displayName": "Amelia Clarke",
        "role": "Executive Director",
        "salary": 325000,
        "allowances": 58000,
        "totalBenefits": 412000,
        "taxNumber": "TN-102938",
        "employeeNumber": "EMP-8821",
        "taxReference": "TN-102938",
        "employeeId": "EMP-8821",
    },
    {
        "displayName": "Oliver Patel",
        "role": "Finance Director",
        "salary": 298000,
        "allowances": 75000,
        "totalBenefits": 395000,
        "taxNumber": "TN-435261",
        "employeeNumber": "EMP-7712",
    },
    {
        "displayName": "Sophia Ahmed",
        "role": "Operations Director",
        "salary": 287000,
        "allowances": 64000,
        "totalBenefits": 365000,
        "taxNumber": "TN-994311",
        "employeeNumber": "EMP-6631",
    },
    {
        "displayName": "Ethan Walker",
        "role": "Managing Director",
        "salary": 342000,
        "allowances": 52000,
        "totalBenefits": 362000,
        "taxNumber": "TN-884562",
        "employeeNumber": "EMP-5520",
    },
    {
        "displayName": "Charlotte Green",
        "role": "Commercial Director",
        "salary": 271000,
        "allowances": 71000,
        "totalBenefits": 349000,
        "taxNumber": "TN-773215",
        "employeeNumber": "EMP-4419",
    },
)


def _to_record(entry: Dict[str, Any]) -> CanonicalRecord:
    return CanonicalRecord(
        display_name=entry["displayName"],
        is_director=True,
        role_raw=entry["role"],
        salary=entry["salary"],
        allowances=entry["allowances"],
        total_benefits=entry["totalBenefits"],
        tax_number=entry["taxNumber"],
        employee_number=entry["employeeNumber"],
        raw=dict(entry),
    )


def get_fallback_records() -> List[CanonicalRecord]:
    """Return a fresh list of the example director records, highest total first."""
    return [_to_record(entry) for entry in FALLBACK_ENTRIES]
