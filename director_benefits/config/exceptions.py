"""Custom exceptions for configuration management."""

from typing import List, Optional


class ConfigurationError(Exception):
    """
    Configuration could not be loaded or validated.

    Raised by the YAML loader and by environment variable validation; the
    entry point prints it and exits with status 1.

    Attributes:
        message: Primary error message
        errors: Individual validation failures, one per field
        suggestions: Hints for fixing the configuration
        source: Where the bad settings came from (a file path or "environment")
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
        source: Optional[str] = None,
    ):
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        headline = f"{self.message} ({self.source})" if self.source else self.message
        lines = [headline]

        if self.errors:
            lines.append("\nValidation Errors:")
            lines.extend(f"  {number}. {error}" for number, error in enumerate(self.errors, 1))

        if self.suggestions:
            lines.append("\nSuggestions:")
            lines.extend(f"  - {hint}" for hint in self.suggestions)

        return "\n".join(lines)
