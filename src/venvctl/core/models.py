"""Data types shared by the resolver, catalog, creator and wizard"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .utils import get_activate_command


class VersionSource(str, Enum):
    """Where an interpreter comes from"""

    MANAGED = "managed"
    SYSTEM = "system"

    def __format__(self, format_spec):
        return str(self.value)


@dataclass(frozen=True)
class InterpreterRef:
    """An absolute interpreter path or a bare command on the search path"""

    command: str
    source: VersionSource
    version: Optional[str] = None

    def __str__(self) -> str:
        return self.command


@dataclass(frozen=True)
class VersionEntry:
    """One selectable interpreter version"""

    label: str
    source: VersionSource
    identifier: str
    version: str


@dataclass
class CreationRequest:
    """Parameters for creating one environment"""

    name: str
    version: Optional[str] = None
    force: bool = False
    activate: bool = False
    install_base: bool = True
    extra_packages: List[str] = field(default_factory=list)


@dataclass
class CreationResult:
    """Outcome of a successful creation"""

    path: Path
    interpreter: InterpreterRef
    python_version: Optional[str]
    installed_packages: List[str] = field(default_factory=list)
    requirements_installed: bool = False

    @property
    def activate_command(self) -> str:
        return get_activate_command(self.path)
