"""Test configuration for venvctl"""

import re
import sys
from pathlib import Path

import pytest

# Add the source directory to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from venvctl.core.config import Configuration  # noqa: E402
from venvctl.core.exceptions import (  # noqa: E402
    CommandError,
    MaterializeError,
    PipError,
)
from venvctl.core.toolchain import Toolchain  # noqa: E402

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


class FakeVersionManager:
    """Stands in for pyenv"""

    name = "pyenv"

    def __init__(self, installed=(), global_version=None, root="/home/user/.pyenv"):
        self.installed = list(installed)
        self._global = global_version
        self.root = root

    def list_installed(self):
        return list(self.installed)

    def global_version(self):
        return self._global

    def python_path(self, version):
        return f"{self.root}/versions/{version}/bin/python"


class BrokenVersionManager(FakeVersionManager):
    """pyenv on the search path whose commands exit non-zero"""

    def list_installed(self):
        raise CommandError("Command failed: pyenv versions")

    def global_version(self):
        raise CommandError("Command failed: pyenv global")


class FakeSystem:
    """Search path with a fixed set of interpreter binaries"""

    def __init__(self, binaries=None, executables=(), versions=None):
        # binary name -> version reported by --version (None if unreadable)
        self.binaries = dict(binaries or {})
        self.executables = set(executables)
        self.versions = dict(versions or {})

    def which(self, name):
        if name in self.binaries:
            return f"/usr/bin/{name}"
        return None

    def is_executable(self, path):
        return path in self.executables

    def python_version(self, command):
        if command in self.binaries:
            return self.binaries[command]
        return self.versions.get(command)


class FakeBuilder:
    """Materializer that writes a minimal venv layout"""

    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def create(self, interpreter, target):
        self.calls.append((interpreter, Path(target)))
        target = Path(target)
        target.mkdir(parents=True)
        (target / "bin").mkdir()
        (target / "bin" / "activate").write_text("")
        if self.fail:
            raise MaterializeError(f"Failed to create virtual environment at {target}")
        (target / "pyvenv.cfg").write_text("home = /usr/bin\n")


class FakePip:
    """Records pip operations instead of running them"""

    def __init__(self, python_path, log, fail_on=()):
        self.python_path = python_path
        self.log = log
        self.fail_on = set(fail_on)

    def _record(self, operation, *args):
        self.log.append((operation, *args))
        if operation in self.fail_on:
            raise PipError(f"Pip command failed: {operation}", details="boom")

    def upgrade_self(self):
        self._record("upgrade_self")

    def install(self, packages, upgrade=False):
        self._record("install", list(packages))

    def install_requirements(self, requirements_file):
        self._record("install_requirements", Path(requirements_file).name)

    def freeze(self):
        self._record("freeze")
        return "click==8.1.7\nrich==13.7.1"

    def list_packages(self):
        self._record("list_packages")
        return [
            {"name": "rich", "version": "13.7.1"},
            {"name": "click", "version": "8.1.7"},
        ]

    def version(self):
        return "24.0"

    def cache_purge(self):
        self._record("cache_purge")


class FakePipFactory:
    def __init__(self, fail_on=()):
        self.log = []
        self.fail_on = fail_on
        self.paths = []

    def __call__(self, python_path=None):
        self.paths.append(python_path)
        return FakePip(python_path, self.log, self.fail_on)


@pytest.fixture
def config():
    """Configuration with built-in defaults and no network access"""
    return Configuration(check_updates=False)


@pytest.fixture
def pip_factory():
    return FakePipFactory()


@pytest.fixture
def builder():
    return FakeBuilder()


@pytest.fixture
def managed_system():
    """pyenv with 3.11.2 installed and nothing else on the search path"""
    manager = FakeVersionManager(installed=["3.11.2"], global_version="3.11.2")
    system = FakeSystem(executables=[manager.python_path("3.11.2")])
    return manager, system


@pytest.fixture
def toolchain(managed_system, builder, pip_factory):
    manager, system = managed_system
    return Toolchain(
        system=system,
        version_manager=manager,
        builder=builder,
        pip_factory=pip_factory,
    )


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing"""
    return tmp_path
