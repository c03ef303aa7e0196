"""Console output handling with consistent styling"""

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Union

from rich.console import Console
from rich.panel import Panel
from rich.status import Status
from rich.table import Table
from rich.text import Text

from ..ui.style import (
    StyleType,
    SymbolType,
    DEFAULT_PANEL,
    DEFAULT_TABLE,
)

console = Console(force_terminal=True, color_system="auto")


def print_error(message: str, details: Optional[str] = None):
    """Display error message"""
    console.print(f"{SymbolType.ERROR} {message}", style=StyleType.ERROR())
    if details:
        console.print(f"  {details}", style=StyleType.DIM(), markup=False)


def print_warning(message: str):
    """Display warning message"""
    console.print(f"{SymbolType.WARNING} {message}", style=StyleType.WARNING())


def print_success(message: str):
    """Display success message"""
    console.print(f"{SymbolType.SUCCESS} {message}", style=StyleType.SUCCESS())


def print_info(message: str):
    """Display info message"""
    console.print(f"{SymbolType.INFO} {message}", style=StyleType.INFO())


def print_tips(message: str):
    """Display a dimmed tip line"""
    console.print(f"[dim]Tip:[/dim] {message}")


@contextmanager
def progress_status(message: str) -> Iterator[Status]:
    """Show a spinner while a blocking step runs"""
    with console.status(message) as status:
        yield status


def display_panel(title: str, content: Union[str, Text], **kwargs) -> None:
    """Display content in a panel with the default styling"""
    console.print(
        Panel.fit(
            content,
            title=title,
            title_align=kwargs.get("title_align", DEFAULT_PANEL.title_align),
            border_style=kwargs.get("border_style", DEFAULT_PANEL.border_style),
            padding=kwargs.get("padding", DEFAULT_PANEL.padding),
        )
    )


def _create_table(title: str) -> Table:
    return Table(
        title=title,
        show_header=DEFAULT_TABLE.show_header,
        header_style=DEFAULT_TABLE.header_style,
        title_justify=DEFAULT_TABLE.title_justify,
        expand=DEFAULT_TABLE.expand,
        padding=DEFAULT_TABLE.padding,
    )


def create_version_table(entries, title: str = "Python Versions") -> Table:
    """Create numbered table of selectable interpreter versions"""
    table = _create_table(title)
    table.add_column("#", justify="right", style=StyleType.DIM())
    table.add_column("Version", style=StyleType.PACKAGE_NAME())
    table.add_column("Source", justify="center")

    for index, entry in enumerate(entries, 1):
        source_style = (
            StyleType.VERSION_MANAGED()
            if entry.source == "managed"
            else StyleType.VERSION_SYSTEM()
        )
        table.add_row(
            str(index),
            entry.label,
            Text(entry.source.value, style=source_style),
        )
    return table


def create_package_table(
    packages: List[Dict], title: str = "Installed Packages"
) -> Table:
    """Create package table with consistent styling"""
    table = _create_table(title)
    table.add_column("Package", style=StyleType.PACKAGE_NAME())
    table.add_column("Version", style=StyleType.PACKAGE_VERSION())

    for package in sorted(packages, key=lambda p: p.get("name", "").lower()):
        table.add_row(package.get("name", ""), package.get("version", ""))
    return table


def print_table(table: Table) -> None:
    """Print table with consistent padding"""
    console.print()
    console.print(table)
    console.print()
