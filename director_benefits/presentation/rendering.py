"""Table rendering: HTML via Jinja2, plain text for terminals.

Templates are loaded from the director_benefits.presentation.templates
package directory with autoescaping and strict undefined checking, so a
missing template variable fails loudly instead of rendering blank.
"""

import logging
from typing import List, Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from .models import TableRow, TableView

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Highest-benefit company directors"

TEXT_HEADERS = ("#", None, "Total benefits", "Salary", "Allowances", "Tax number", "Employee number")
# Columns right-aligned in text output
NUMERIC_COLUMNS = frozenset({0, 2, 3, 4})


class RenderError(Exception):
    """Template rendering failed."""

    pass


class TableRenderer:
    """Renders a TableView as an HTML document or a plain-text table."""

    def __init__(
        self,
        template_dir: str = "templates",
        html_template: str = "ranking_table.html.j2",
        title: str = DEFAULT_TITLE,
    ):
        """Initialize the renderer.

        Args:
            template_dir: Directory name within the presentation package
            html_template: Filename of the HTML template
            title: Page/table title
        """
        self.html_template_name = html_template
        self.title = title
        self.env = Environment(
            loader=PackageLoader("director_benefits.presentation", template_dir),
            autoescape=True,
            undefined=StrictUndefined,
        )

    def render_html(self, view: TableView) -> str:
        """Render the HTML document.

        Raises:
            RenderError: If template rendering fails
        """
        try:
            template = self.env.get_template(self.html_template_name)
            html = template.render(
                title=self.title,
                status=view.status,
                dimension_label=view.dimension_label,
                sort_label=view.sort_label,
                rows=view.rows,
                generated_at=view.generated_at.strftime("%Y-%m-%d %H:%M:%S"),
            )
        except TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            logger.error(error_msg, exc_info=True)
            raise RenderError(error_msg) from e

        logger.debug(f"Rendered HTML table with {len(view.rows)} rows")
        return html

    def render_text(self, view: TableView) -> str:
        """Render the status line and an aligned plain-text table."""
        status_prefix = "ERROR: " if view.status.is_error else ""
        lines = [f"{status_prefix}{view.status.text}", f"Sorted by {view.sort_label}", ""]

        if not view.rows:
            lines.append("No director records to display.")
            return "\n".join(lines)

        headers = [header or view.dimension_label for header in TEXT_HEADERS]
        table = [headers] + [self._row_cells(row) for row in view.rows]
        widths = [max(len(cells[i]) for cells in table) for i in range(len(headers))]

        for index, cells in enumerate(table):
            lines.append(self._format_line(cells, widths))
            if index == 0:
                lines.append("  ".join("-" * width for width in widths))

        return "\n".join(lines)

    @staticmethod
    def _row_cells(row: TableRow) -> List[str]:
        return [
            str(row.rank),
            row.dimension_value,
            row.total_benefits,
            row.salary,
            row.allowances,
            row.tax_number,
            row.employee_number,
        ]

    @staticmethod
    def _format_line(cells: Sequence[str], widths: Sequence[int]) -> str:
        padded = [
            cell.rjust(width) if i in NUMERIC_COLUMNS else cell.ljust(width)
            for i, (cell, width) in enumerate(zip(cells, widths))
        ]
        return "  ".join(padded).rstrip()
