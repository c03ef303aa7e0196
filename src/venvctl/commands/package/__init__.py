"""Package maintenance commands"""

from .clean_command import clean
from .freeze_command import freeze
from .list_command import list_packages

__all__ = ["clean", "freeze", "list_packages"]
