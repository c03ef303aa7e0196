# Tests for the pip wrapper

import json
import subprocess

import pytest

from venvctl.core.exceptions import PipError
from venvctl.core.pip import PipWrapper


class FakePopen:
    """Popen replacement returning canned output"""

    calls = []
    returncode_for = {}
    stdout_for = {}

    def __init__(self, cmd, stdout=None, stderr=None, text=None, env=None):
        FakePopen.calls.append((cmd, env))
        action = cmd[3]
        self.returncode = FakePopen.returncode_for.get(action, 0)
        self._stdout = FakePopen.stdout_for.get(action, "")

    def communicate(self):
        return self._stdout, "error output" if self.returncode else ""

    def wait(self):
        return self.returncode


@pytest.fixture
def popen(monkeypatch):
    FakePopen.calls = []
    FakePopen.returncode_for = {}
    FakePopen.stdout_for = {}
    monkeypatch.setattr(subprocess, "Popen", FakePopen)
    return FakePopen


def test_install_packages(popen):
    """Test pip install arguments"""
    PipWrapper("/env/bin/python").install(["requests", "click>=8"])

    cmd, env = popen.calls[0]
    assert cmd == ["/env/bin/python", "-m", "pip", "install", "requests", "click>=8"]
    assert env["PIP_DISABLE_PIP_VERSION_CHECK"] == "1"
    assert "PATH" in env


def test_install_nothing_runs_nothing(popen):
    PipWrapper("/env/bin/python").install([])
    assert popen.calls == []


def test_upgrade_self(popen):
    PipWrapper("/env/bin/python").upgrade_self()
    assert popen.calls[0][0][3:] == ["install", "--upgrade", "pip"]


def test_install_requirements(popen, temp_dir):
    requirements = temp_dir / "requirements.txt"
    PipWrapper("/env/bin/python").install_requirements(requirements)
    assert popen.calls[0][0][3:] == ["install", "-r", str(requirements)]


def test_failure_raises_pip_error(popen):
    """Test a non-zero exit becomes PipError with stderr details"""
    popen.returncode_for["install"] = 1

    with pytest.raises(PipError) as exc_info:
        PipWrapper("/env/bin/python").install(["missing-package"])

    assert exc_info.value.details == "error output"


def test_freeze_and_list(popen):
    """Test output parsing"""
    popen.stdout_for["freeze"] = "click==8.1.7\nrich==13.7.1\n"
    popen.stdout_for["list"] = json.dumps([{"name": "rich", "version": "13.7.1"}])
    pip = PipWrapper("/env/bin/python")

    assert pip.freeze() == "click==8.1.7\nrich==13.7.1"
    assert pip.list_packages() == [{"name": "rich", "version": "13.7.1"}]


def test_cache_purge(popen):
    PipWrapper("/env/bin/python").cache_purge()
    assert popen.calls[0][0][3:] == ["cache", "purge"]


def test_version(popen):
    popen.stdout_for["--version"] = "pip 24.0 from /env/lib/site-packages/pip (python 3.12)"
    assert PipWrapper("/env/bin/python").version() == "24.0"

    popen.returncode_for["--version"] = 1
    assert PipWrapper("/env/bin/python").version() is None
