"""Available Python versions command"""

import click

from ..ui.console import (
    create_version_table,
    print_table,
    print_warning,
    progress_status,
)
from .common import get_toolchain, handle_errors


@click.command()
@handle_errors
def versions():
    """Show Python versions available for new environments"""
    with progress_status("Looking for Python interpreters..."):
        entries = get_toolchain().catalog().enumerate()

    if not entries:
        print_warning("No Python interpreters found")
        return
    print_table(create_version_table(entries))
