"""Command implementations for the CLI interface"""

from .venv import activate, create, delete, info, wizard
from .package import clean, freeze, list_packages
from .versions_command import versions
from .config_command import config

__all__ = [
    "activate",
    "create",
    "delete",
    "info",
    "wizard",
    "clean",
    "freeze",
    "list_packages",
    "versions",
    "config",
]
