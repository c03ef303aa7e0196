"""Enumerate the interpreter versions available for new environments"""

from typing import List, Optional, Set

from .exceptions import VenvCtlError
from .models import VersionEntry, VersionSource
from .pyenv import PyenvManager
from .system import SystemProbe
from .utils import normalize_version

# Probed in this order, newest first
SYSTEM_BINARIES = (
    "python3.14",
    "python3.13",
    "python3.12",
    "python3.11",
    "python3.10",
    "python3.9",
    "python3.8",
    "python3",
    "python",
)


class VersionCatalog:
    """Collect distinct interpreter versions from pyenv and the search path"""

    def __init__(
        self,
        system: SystemProbe,
        version_manager: Optional[PyenvManager] = None,
        binaries=SYSTEM_BINARIES,
    ):
        self.system = system
        self.version_manager = version_manager
        self.binaries = tuple(binaries)

    def enumerate(self) -> List[VersionEntry]:
        """
        List available versions, one entry per distinct version number.

        The pyenv global version comes first, then the other pyenv
        versions, then system binaries not already covered by pyenv.
        """
        entries: List[VersionEntry] = []
        seen: Set[str] = set()

        for entry in self._managed_entries():
            entries.append(entry)
            seen.add(entry.version)

        for entry in self._system_entries():
            if entry.version in seen:
                continue
            entries.append(entry)
            seen.add(entry.version)

        return entries

    def _managed_entries(self) -> List[VersionEntry]:
        if self.version_manager is None:
            return []

        manager = self.version_manager
        try:
            installed = manager.list_installed()
            global_version = manager.global_version()
        except VenvCtlError:
            return []

        entries = []
        if global_version and global_version in installed:
            entries.append(
                VersionEntry(
                    label=f"{global_version} ({manager.name}, global)",
                    source=VersionSource.MANAGED,
                    identifier=global_version,
                    version=normalize_version(global_version),
                )
            )

        for version in installed:
            if version == global_version:
                continue
            entries.append(
                VersionEntry(
                    label=f"{version} ({manager.name})",
                    source=VersionSource.MANAGED,
                    identifier=version,
                    version=normalize_version(version),
                )
            )
        return entries

    def _system_entries(self) -> List[VersionEntry]:
        entries = []
        for binary in self.binaries:
            if not self.system.which(binary):
                continue
            version = self.system.python_version(binary)
            if not version:
                continue
            entries.append(
                VersionEntry(
                    label=f"{binary} ({version})",
                    source=VersionSource.SYSTEM,
                    identifier=binary,
                    version=normalize_version(version),
                )
            )
        return entries
