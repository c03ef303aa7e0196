"""Version checker for venvctl"""

import importlib.metadata

import requests
from packaging.version import InvalidVersion, Version

from ..ui.console import console

PYPI_URL = "https://pypi.org/pypi/venvctl/json"


def check_for_updates(timeout: float = 5) -> None:
    """Check for venvctl updates on PyPI"""
    try:
        current_version = importlib.metadata.version("venvctl")
        response = requests.get(PYPI_URL, timeout=timeout)
        if response.status_code != 200:
            return
        latest_version = response.json()["info"]["version"]

        if Version(latest_version) > Version(current_version):
            console.print(
                f"\n[yellow]New version available: [cyan]{latest_version}[/cyan] (current: {current_version})[/yellow]"
            )
            console.print(
                "[yellow]To update, run: [cyan]pipx upgrade venvctl[/cyan][/yellow]\n"
            )
    except (
        importlib.metadata.PackageNotFoundError,
        requests.RequestException,
        InvalidVersion,
        KeyError,
        ValueError,
    ):
        # Update check is best effort
        pass
