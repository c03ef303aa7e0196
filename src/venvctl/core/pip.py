# Pip operations inside a virtual environment
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import json
import os
import subprocess
import sys

from .exceptions import PipError


class PipWrapper:
    """Wrapper for pip command line interface."""

    def __init__(self, python_path: Optional[str] = None):
        """
        Initialize pip wrapper.

        Args:
            python_path: Optional path to Python executable
        """
        self.python_path = str(python_path or sys.executable)

    def run(self, *args: str, capture_output: bool = True) -> Tuple[str, str]:
        """
        Run pip command with given arguments.

        Args:
            *args: Command arguments
            capture_output: Whether to capture command output

        Returns:
            Tuple of (stdout, stderr) if capture_output is True

        Raises:
            PipError: If command fails
        """
        cmd = [self.python_path, "-m", "pip", *args]
        env = {**os.environ, "PIP_DISABLE_PIP_VERSION_CHECK": "1"}

        try:
            if capture_output:
                process = subprocess.Popen(
                    cmd,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                    text=True,
                    env=env,
                )
                stdout, stderr = process.communicate()
            else:
                process = subprocess.Popen(cmd, env=env)
                process.wait()
                stdout = stderr = ""
        except OSError as e:
            raise PipError(
                f"Failed to run pip command: {' '.join(cmd)}",
                details=str(e),
            ) from e

        if process.returncode != 0:
            raise PipError(
                f"Pip command failed: {' '.join(cmd)}",
                details=stderr.strip() if capture_output else None,
            )

        return stdout.strip(), stderr.strip()

    def install(self, packages: List[str], upgrade: bool = False) -> None:
        """
        Install packages.

        Args:
            packages: Package specifiers, e.g. ``requests`` or ``click>=8``
            upgrade: Whether to upgrade existing packages

        Raises:
            PipError: If installation fails
        """
        if not packages:
            return
        args = ["install"]
        if upgrade:
            args.append("--upgrade")
        args.extend(packages)
        self.run(*args)

    def upgrade_self(self) -> None:
        """Upgrade pip itself"""
        self.install(["pip"], upgrade=True)

    def install_requirements(self, requirements_file: Path) -> None:
        """
        Install everything listed in a requirements file.

        Raises:
            PipError: If installation fails
        """
        self.run("install", "-r", str(requirements_file))

    def freeze(self) -> str:
        """
        Get installed packages in requirements format.

        Raises:
            PipError: If freezing fails
        """
        stdout, _ = self.run("freeze")
        return stdout

    def list_packages(self) -> List[Dict]:
        """
        List installed packages.

        Returns:
            List of dictionaries with ``name`` and ``version``

        Raises:
            PipError: If listing fails
        """
        stdout, _ = self.run("list", "--format=json")
        try:
            return json.loads(stdout or "[]")
        except json.JSONDecodeError as e:
            raise PipError("Unexpected pip list output", details=str(e)) from e

    def version(self) -> Optional[str]:
        """Get pip's own version, None if pip is unusable"""
        try:
            stdout, _ = self.run("--version")
        except PipError:
            return None
        parts = stdout.split()
        return parts[1] if len(parts) > 1 else None

    def cache_purge(self) -> None:
        """
        Clear pip cache.

        Raises:
            PipError: If clearing cache fails
        """
        self.run("cache", "purge")
