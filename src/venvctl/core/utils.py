# Core utility functions for running the interpreter toolchain
import os
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from packaging.version import InvalidVersion, Version

from .exceptions import CommandError


def run_command(
    cmd: List[str],
    env: Optional[Dict[str, str]] = None,
    capture_output: bool = True,
) -> Tuple[str, str]:
    """
    Run an external command and wait for it to finish.

    Args:
        cmd: Command and arguments
        env: Extra environment variables merged over os.environ
        capture_output: Whether to capture command output

    Returns:
        Tuple of (stdout, stderr), both empty when output is not captured

    Raises:
        CommandError: If the command cannot be started or exits non-zero
    """
    full_env = {**os.environ, **(env or {})}
    try:
        result = subprocess.run(
            cmd,
            capture_output=capture_output,
            text=True,
            env=full_env,
        )
    except OSError as e:
        raise CommandError(
            f"Failed to run command: {' '.join(cmd)}", details=str(e)
        ) from e

    stdout = (result.stdout or "").strip() if capture_output else ""
    stderr = (result.stderr or "").strip() if capture_output else ""
    if result.returncode != 0:
        raise CommandError(
            f"Command failed: {' '.join(cmd)}",
            details=stderr or stdout or None,
        )
    return stdout, stderr


def normalize_version(version: str) -> str:
    """
    Normalize a version string so equal versions compare equal.

    Non PEP 440 names such as ``pypy3.10-7.3.12`` or ``miniconda3-latest``
    are returned unchanged.
    """
    version = version.strip()
    try:
        return str(Version(version))
    except InvalidVersion:
        return version


def parse_python_version(output: str) -> Optional[str]:
    """
    Extract the version from ``python --version`` output.

    Args:
        output: Text such as ``Python 3.11.4``

    Returns:
        The version string, or None if the output is not recognised
    """
    parts = output.strip().split()
    if len(parts) >= 2 and parts[0].lower() == "python":
        return parts[1]
    return None


def get_env_python(venv_path: Path) -> Path:
    """Get the interpreter path inside a virtual environment"""
    if sys.platform == "win32":
        return venv_path / "Scripts" / "python.exe"
    return venv_path / "bin" / "python"


def get_activate_script(venv_path: Path) -> Path:
    """Get the activation script path based on the platform"""
    if sys.platform == "win32":
        return venv_path / "Scripts" / "activate.bat"
    return venv_path / "bin" / "activate"


def get_activate_command(venv_path: Path) -> str:
    """Get the shell command that activates a virtual environment"""
    if sys.platform == "win32":
        return str(get_activate_script(venv_path))
    return f"source {get_activate_script(venv_path)}"


def is_valid_venv(venv_path: Path) -> bool:
    """Check if a directory looks like a virtual environment"""
    return (venv_path / "pyvenv.cfg").is_file()


def split_packages(value: Optional[str]) -> List[str]:
    """Split a space separated package string, dropping blanks"""
    if not value:
        return []
    return [pkg for pkg in value.split() if pkg]
