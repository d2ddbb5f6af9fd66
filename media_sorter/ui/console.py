"""Console UI wrapper using Rich library."""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


class ConsoleUI:
    """
    Rich console with one styled line per message kind.

    Messages are escaped before styling: release names such as
    "[Group] Show - 01.mkv" would otherwise be read as markup tags.
    """

    STYLES = {
        "info": ("blue", "ℹ️ "),
        "warning": ("yellow", "⚠️ "),
        "error": ("red", "❌"),
        "success": ("green", "✓"),
    }

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def _print_styled(self, kind: str, message: str) -> None:
        color, icon = self.STYLES[kind]
        self.console.print(f"[{color}]{icon} {escape(message)}[/{color}]")

    def print_info(self, message: str) -> None:
        """Print an info message in blue."""
        self._print_styled("info", message)

    def print_warning(self, message: str) -> None:
        """Print a warning message in yellow."""
        self._print_styled("warning", message)

    def print_error(self, message: str) -> None:
        """Print an error message in red."""
        self._print_styled("error", message)

    def print_success(self, message: str) -> None:
        """Print a success message in green."""
        self._print_styled("success", message)

    def print_panel(
        self,
        content: str,
        title: str = "",
        border_style: str = "blue"
    ) -> None:
        """
        Print content in a bordered panel.

        Args:
            content: Panel content.
            title: Panel title.
            border_style: Border color/style.
        """
        panel = Panel(content, title=title, border_style=border_style)
        self.console.print(panel)

    def create_table(
        self,
        title: str,
        columns: Optional[List[str]] = None
    ) -> Table:
        """
        Create a Rich Table with optional columns.

        Args:
            title: Table title.
            columns: List of column headers.

        Returns:
            Rich Table instance.
        """
        table = Table(title=title, show_header=True, header_style="bold magenta")
        if columns:
            for col in columns:
                table.add_column(col)
        return table

    def print_table(self, table: Table) -> None:
        """Print a Rich Table."""
        self.console.print(table)
