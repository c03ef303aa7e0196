# Core functionality for virtual environment management
from .catalog import VersionCatalog
from .config import Configuration
from .creator import EnvironmentCreator
from .models import (
    CreationRequest,
    CreationResult,
    InterpreterRef,
    VersionEntry,
    VersionSource,
)
from .resolver import VersionResolver
from .toolchain import Toolchain
from .wizard import InteractiveWizard
from .exceptions import (
    VenvCtlError,
    NotFoundError,
    AlreadyExistsError,
    InstallFailedError,
    InvalidSelectionError,
    MaterializeError,
    CommandError,
    PipError,
    ConfigError,
)

__all__ = [
    "VersionCatalog",
    "Configuration",
    "EnvironmentCreator",
    "CreationRequest",
    "CreationResult",
    "InterpreterRef",
    "VersionEntry",
    "VersionSource",
    "VersionResolver",
    "Toolchain",
    "InteractiveWizard",
    "VenvCtlError",
    "NotFoundError",
    "AlreadyExistsError",
    "InstallFailedError",
    "InvalidSelectionError",
    "MaterializeError",
    "CommandError",
    "PipError",
    "ConfigError",
]
