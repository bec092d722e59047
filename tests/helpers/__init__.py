"""Test helper utilities for Director Benefits tests."""

from .fixture_client import FIXTURES_DIR, FixtureClient, load_fixture_payloads
from .http import TEST_URL, make_response

__all__ = ["FIXTURES_DIR", "FixtureClient", "load_fixture_payloads", "TEST_URL", "make_response"]
