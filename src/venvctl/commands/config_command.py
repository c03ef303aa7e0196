"""Show or change persisted defaults"""

import click

from ..core.config import Configuration, default_config_path
from ..core.utils import split_packages
from ..ui.console import display_panel, print_success
from ..ui.formatting import Text
from ..ui.style import StyleType
from .common import get_config, handle_errors


def display_config(config: Configuration) -> None:
    content = (
        Text()
        .append_field("Default Name", config.env_name, align=True)
        .append_field(
            "Base Packages",
            " ".join(config.packages) or "None",
            value_style=StyleType.PACKAGE_NAME(),
            align=True,
        )
        .append_field("Requirements", config.requirements_file, align=True)
        .append_field(
            "Update Check",
            "on" if config.check_updates else "off",
            align=True,
        )
        .append_field(
            "File",
            str(default_config_path()),
            value_style=StyleType.ENV_PATH(),
            align=True,
            add_newline=False,
        )
    )
    display_panel("Configuration", content)


@click.command()
@click.option("--name", help="Default environment directory name")
@click.option("--packages", help='Base packages, e.g. "setuptools wheel"')
@click.option("--requirements", help="Requirements file installed on create")
@click.option(
    "--check-updates/--no-check-updates",
    default=None,
    help="Check PyPI for a newer venvctl on start",
)
@click.option("--reset", is_flag=True, help="Restore built-in defaults")
@handle_errors
def config(
    name: str = None,
    packages: str = None,
    requirements: str = None,
    check_updates: bool = None,
    reset: bool = False,
):
    """Show or update default settings"""
    current = Configuration() if reset else get_config()
    changed = reset

    if name is not None and name.strip():
        current.env_name = name.strip()
        changed = True
    if packages is not None:
        current.packages = split_packages(packages)
        changed = True
    if requirements is not None and requirements.strip():
        current.requirements_file = requirements.strip()
        changed = True
    if check_updates is not None:
        current.check_updates = check_updates
        changed = True

    if changed:
        path = current.save()
        print_success(f"Configuration saved to {path}")
    display_config(current)
