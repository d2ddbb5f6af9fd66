"""User interface components."""

from media_sorter.ui.console import ConsoleUI
from media_sorter.ui.display import display_configuration, display_report

__all__ = [
    "ConsoleUI",
    "display_configuration",
    "display_report",
]
