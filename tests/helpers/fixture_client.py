"""Fixture-based client for testing.

Serves payloads from a YAML fixture file instead of calling the HMRC
API, so controller tests run deterministically against realistic
payload shapes.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from director_benefits.client import BenefitsClient, ClientHTTPError

from .http import TEST_URL

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def load_fixture_payloads(fixture_path: Path) -> Dict[str, Any]:
    """Load named payloads from a YAML file.

    Raises:
        FileNotFoundError: If fixture file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture file not found: {fixture_path}")

    with open(fixture_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return data.get("payloads", {})


class FixtureClient(BenefitsClient):
    """BenefitsClient that returns a fixture payload or fails with a status.

    Attributes:
        payloads: Named payloads loaded from the fixture file
        payload_name: Payload returned by the next fetch
        status_code: When set, every fetch fails with this HTTP status
        fetch_count: Number of fetch_payload() calls
    """

    def __init__(
        self,
        payload_name: str = "mixed",
        fixture_path: Path = FIXTURES_DIR / "payloads.yaml",
        status_code: Optional[int] = None,
    ):
        super().__init__(url=TEST_URL)
        self.payloads = load_fixture_payloads(fixture_path)
        self.payload_name = payload_name
        self.status_code = status_code
        self.fetch_count = 0

    def fetch_payload(self) -> Any:
        self.fetch_count += 1
        if self.status_code is not None:
            raise ClientHTTPError(
                f"HMRC API request failed ({self.status_code})",
                status_code=self.status_code,
                url=self.url,
            )
        return self.payloads[self.payload_name]
