"""pyenv integration: installed versions, global version and binary paths"""

import os
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .system import SystemProbe
from .utils import run_command

Runner = Callable[[List[str]], Tuple[str, str]]


class PyenvManager:
    """Wrapper for the pyenv command line interface"""

    def __init__(
        self,
        root: Optional[Path] = None,
        command: str = "pyenv",
        runner: Optional[Runner] = None,
    ):
        """
        Initialize pyenv wrapper.

        Args:
            root: pyenv root directory, defaults to $PYENV_ROOT or ~/.pyenv
            command: pyenv executable
            runner: Callable used to execute commands
        """
        if root is None:
            root = Path(
                os.environ.get("PYENV_ROOT") or Path.home() / ".pyenv"
            )
        self.root = Path(root)
        self.command = command
        self.runner = runner or run_command

    @classmethod
    def detect(cls, system: SystemProbe) -> Optional["PyenvManager"]:
        """Return a manager if pyenv is on the search path"""
        command = system.which("pyenv")
        if not command:
            return None
        return cls(command=command)

    @property
    def name(self) -> str:
        return "pyenv"

    def list_installed(self) -> List[str]:
        """
        List installed versions in pyenv's order.

        Raises:
            CommandError: If pyenv fails
        """
        stdout, _ = self.runner(
            [self.command, "versions", "--bare", "--skip-aliases"]
        )
        return [line.strip() for line in stdout.splitlines() if line.strip()]

    def global_version(self) -> Optional[str]:
        """
        Get the configured global version.

        Returns:
            The first global version, or None when pyenv defers to the
            system interpreter

        Raises:
            CommandError: If pyenv fails
        """
        stdout, _ = self.runner([self.command, "global"])
        versions = [line.strip() for line in stdout.splitlines() if line.strip()]
        if not versions or versions[0] == "system":
            return None
        return versions[0]

    def python_path(self, version: str) -> str:
        """Get the canonical interpreter path of an installed version"""
        return str(self.root / "versions" / version / "bin" / "python")
