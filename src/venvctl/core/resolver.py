"""Pick the interpreter a new environment is built from"""

from typing import Optional

from packaging.version import InvalidVersion, Version

from .exceptions import CommandError, NotFoundError
from .models import InterpreterRef, VersionSource
from .pyenv import PyenvManager
from .system import SystemProbe

FALLBACK_COMMANDS = ("python3", "python")


class VersionResolver:
    """
    Resolve a requested version to an interpreter.

    Explicit requests are matched against pyenv installs first and then
    against ``python<version>`` binaries. An explicit request that matches
    nothing is an error. Without a request the pyenv global version is used,
    then ``python3`` and ``python``.
    """

    def __init__(
        self,
        system: SystemProbe,
        version_manager: Optional[PyenvManager] = None,
    ):
        self.system = system
        self.version_manager = version_manager

    def resolve(self, requested: Optional[str] = None) -> InterpreterRef:
        """
        Resolve a version identifier

        Args:
            requested: Version such as ``3.11.4`` or ``3.12``, a binary name
                such as ``python3.12``, or None for the default interpreter

        Returns:
            The interpreter to use

        Raises:
            NotFoundError: If no interpreter matches
        """
        requested = (requested or "").strip()
        if requested:
            return self._resolve_requested(requested)
        return self._resolve_default()

    def _match_installed(self, requested: str) -> Optional[str]:
        """Find an installed version equal to, or a release of, requested"""
        try:
            installed = self.version_manager.list_installed()
        except CommandError:
            return None
        if requested in installed:
            return requested

        # "3.11" selects the newest installed 3.11.x
        candidates = []
        for version in installed:
            if not version.startswith(f"{requested}."):
                continue
            try:
                candidates.append((Version(version), version))
            except InvalidVersion:
                continue
        if not candidates:
            return None
        return max(candidates)[1]

    def _resolve_requested(self, requested: str) -> InterpreterRef:
        if self.version_manager is not None:
            version = self._match_installed(requested)
            if version:
                return InterpreterRef(
                    command=self.version_manager.python_path(version),
                    source=VersionSource.MANAGED,
                    version=version,
                )

        command = (
            requested
            if requested.startswith("python")
            else f"python{requested}"
        )
        if self.system.which(command):
            return InterpreterRef(command=command, source=VersionSource.SYSTEM)

        raise NotFoundError(f"version {requested} not found")

    def _resolve_default(self) -> InterpreterRef:
        if self.version_manager is not None:
            try:
                version = self.version_manager.global_version()
            except CommandError:
                version = None
            if version:
                path = self.version_manager.python_path(version)
                if self.system.is_executable(path):
                    return InterpreterRef(
                        command=path,
                        source=VersionSource.MANAGED,
                        version=version,
                    )

        for command in FALLBACK_COMMANDS:
            if self.system.which(command):
                return InterpreterRef(
                    command=command, source=VersionSource.SYSTEM
                )

        raise NotFoundError("no python interpreter available")
