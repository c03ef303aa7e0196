"""Package listing command"""

import click

from ...core.utils import get_env_python
from ...ui.console import create_package_table, print_table, progress_status
from ..common import get_config, get_toolchain, handle_errors


@click.command(name="list")
@click.argument("name", required=False)
@handle_errors
def list_packages(name: str = None):
    """List packages installed in an environment"""
    toolchain = get_toolchain()
    venv_path = toolchain.venv_manager().find(name or get_config().env_name)
    with progress_status("Listing packages..."):
        packages = toolchain.pip(str(get_env_python(venv_path))).list_packages()
    print_table(
        create_package_table(packages, title=f"Packages in {venv_path}")
    )
