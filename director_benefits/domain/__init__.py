"""Domain models for Director Benefits."""

from .models import NOT_AVAILABLE, PLACEHOLDER, CanonicalRecord

__all__ = ["CanonicalRecord", "NOT_AVAILABLE", "PLACEHOLDER"]
