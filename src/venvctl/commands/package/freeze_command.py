"""Requirements export command"""

from pathlib import Path

import click

from ...core.utils import get_env_python
from ...ui.console import console, print_success
from ..common import get_config, get_toolchain, handle_errors


@click.command()
@click.argument("name", required=False)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write to this file instead of printing",
)
@handle_errors
def freeze(name: str = None, output: Path = None):
    """Export installed packages in requirements format"""
    toolchain = get_toolchain()
    venv_path = toolchain.venv_manager().find(name or get_config().env_name)
    manifest = toolchain.pip(str(get_env_python(venv_path))).freeze()

    if output is None:
        console.print(manifest, markup=False, highlight=False)
        return

    output.write_text(f"{manifest}\n" if manifest else "", encoding="utf-8")
    count = len([line for line in manifest.splitlines() if line.strip()])
    print_success(f"Wrote {count} packages to {output}")
