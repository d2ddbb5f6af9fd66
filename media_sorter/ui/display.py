"""Display functions for sorting output."""

from pathlib import Path

from rich.markup import escape

from media_sorter.config.resolution import SorterConfig
from media_sorter.models.placement import SortReport
from media_sorter.ui.console import ConsoleUI


def _relative_to(path: Path, root: Path) -> str:
    """Path relative to root when possible, for compact display."""
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def display_configuration(config: SorterConfig, console: ConsoleUI) -> None:
    """
    Display the resolved configuration.

    Args:
        config: Resolved configuration.
        console: Console UI instance.
    """
    mode_parts = []
    if config.keep_prefix:
        mode_parts.append("[cyan]KEEP PREFIX[/cyan]")
    if config.dry_run:
        mode_parts.append("[yellow]SIMULATION[/yellow]")
    if not mode_parts:
        mode_parts.append("[green]Normal[/green]")

    console.print_panel(
        f"[bold]Sorting configuration[/bold]\n"
        f"Source: [cyan]{escape(str(config.source_dir))}[/cyan]\n"
        f"Target: [cyan]{escape(str(config.target_dir))}[/cyan]\n"
        f"Extensions: {', '.join(sorted(config.extensions))}\n"
        f"Mode: {' '.join(mode_parts)}",
        title="Media Sorter",
    )


def display_report(report: SortReport, target_dir: Path, console: ConsoleUI) -> None:
    """
    Display the placements of a sorting pass.

    Args:
        report: Report returned by the sorter.
        target_dir: Root of the destination tree.
        console: Console UI instance.
    """
    if report.is_empty:
        console.print_info(
            f"No {', '.join(sorted(report.extensions))} files found in {report.source_dir}"
        )
        return

    title = "Simulated placements" if report.dry_run else "Placements"
    table = console.create_table(title, ["File", "Directory", "New"])
    for placement in report.placements:
        table.add_row(
            escape(placement.destination.name),
            escape(_relative_to(placement.directory, target_dir)),
            "✓" if placement.created_directory else "",
        )
    console.print_table(table)

    created = len(report.created_directories)
    console.print_success(f"{report.moved} file(s) sorted, {created} new directory(ies)")
