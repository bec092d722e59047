"""Bundled datasets."""

from .fallback import FALLBACK_ENTRIES, get_fallback_records

__all__ = ["FALLBACK_ENTRIES", "get_fallback_records"]
