"""Pip cache cleanup command"""

import click

from ...ui.console import print_success, progress_status
from ..common import get_toolchain, handle_errors


@click.command()
@handle_errors
def clean():
    """Purge pip's download and wheel cache"""
    with progress_status("Purging pip cache..."):
        get_toolchain().pip().cache_purge()
    print_success("Pip cache purged")
