"""Shared fixtures for Director Benefits tests."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest
import requests

from director_benefits.client import BenefitsClient
from director_benefits.logging.context import clear_log_context
from tests.helpers import TEST_URL


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove configuration variables and logging context between tests."""
    for name in ("BENEFITS_API_URL", "LOG_LEVEL", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def fixed_clock():
    """Clock returning a constant local time."""
    return lambda: datetime(2025, 11, 4, 10, 30, 15)


@pytest.fixture
def mock_session():
    """requests.Session mock with a real headers dict."""
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def client(mock_session):
    """BenefitsClient wired to the mock session."""
    return BenefitsClient(url=TEST_URL, timeout=30, session=mock_session)


@pytest.fixture
def mixed_payload():
    """Payload mixing directors, non-directors and a malformed element."""
    return {
        "items": [
            {
                "fullName": "Grace Hopper",
                "jobTitle": "Technical Director",
                "salary": "£210,000",
                "allowances": "£15,500",
                "totalBenefits": "£240,000",
                "taxReference": "TR-1",
                "payrollNumber": "P-1",
            },
            {
                "name": "Alan Turing",
                "role": "Engineer",
                "salary": 90000,
                "allowances": 2000,
            },
            "not a record",
            {
                "employeeName": "Ada Lovelace",
                "position": "Managing Director",
                "cash": "300,000",
                "expenses": "40,000",
                "total": 0,
            },
        ]
    }
