"""Presentation layer: control options, display sorting, formatting and rendering."""

from .controls import build_dimension_options, build_sort_options, populate_controls, to_label
from .formatting import format_currency, format_value
from .models import ControlState, Option, StatusMessage, TableRow, TableView
from .ranking import build_rows, compare_values, rank_by_total, sort_for_display
from .rendering import RenderError, TableRenderer

__all__ = [
    # Controls
    "populate_controls",
    "build_dimension_options",
    "build_sort_options",
    "to_label",
    # Ranking
    "rank_by_total",
    "sort_for_display",
    "compare_values",
    "build_rows",
    # Formatting
    "format_currency",
    "format_value",
    # Rendering
    "TableRenderer",
    "RenderError",
    # View models
    "ControlState",
    "Option",
    "StatusMessage",
    "TableRow",
    "TableView",
]
