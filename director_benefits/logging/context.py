"""Scoped logging context.

Fields pushed here (``load_id``, ``trigger``) are copied onto every log
record emitted while the scope is active, so all events belonging to one
data load can be correlated.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional


LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active logging context."""
    return LogContextVar.get().copy()


def push_log_context(**fields: Any) -> Token:
    """Merge ``fields`` into the active context.

    Returns:
        Token to hand back to pop_log_context() to restore the previous state
    """
    merged = {**LogContextVar.get(), **fields}
    return LogContextVar.set(merged)


def pop_log_context(token: Token) -> None:
    """Restore the context captured by ``token``."""
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Drop every context field (used by tests)."""
    LogContextVar.set({})


class log_context:
    """Context manager pushing fields for the duration of a block.

    Example:
        >>> with log_context(load_id="3f2a", trigger="refresh"):
        ...     logger.info("Fetching payload")
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
