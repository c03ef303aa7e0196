import os
import shutil
import subprocess
from typing import Dict, Optional

from .utils import parse_python_version


class SystemProbe:
    """
    Looks up interpreter binaries on the search path and asks them for
    their version
    """

    def __init__(self, path: Optional[str] = None):
        """
        Initialize probe

        Args:
            path: Search path to use instead of the PATH environment variable
        """
        self.path = path
        self._versions: Dict[str, Optional[str]] = {}

    def which(self, name: str) -> Optional[str]:
        """Return the full path of an executable on the search path"""
        return shutil.which(name, path=self.path)

    def is_executable(self, path: str) -> bool:
        """Check that a file exists and can be executed"""
        return os.path.isfile(path) and os.access(path, os.X_OK)

    def python_version(self, command: str) -> Optional[str]:
        """
        Get the version reported by an interpreter

        Args:
            command: Interpreter path or command name

        Returns:
            Version string such as ``3.11.4``, or None when the interpreter
            cannot be run
        """
        if command in self._versions:
            return self._versions[command]

        try:
            result = subprocess.run(
                [command, "--version"],
                capture_output=True,
                text=True,
                timeout=10,
            )
        except (OSError, subprocess.SubprocessError):
            version = None
        else:
            # Python 2 prints its version on stderr
            output = result.stdout.strip() or result.stderr.strip()
            version = (
                parse_python_version(output)
                if result.returncode == 0
                else None
            )

        self._versions[command] = version
        return version
