# Tests for the pyenv wrapper

from pathlib import Path

import pytest

from venvctl.core.exceptions import CommandError
from venvctl.core.pyenv import PyenvManager
from conftest import FakeSystem


class RecordingRunner:
    def __init__(self, outputs):
        self.outputs = outputs
        self.commands = []

    def __call__(self, cmd):
        self.commands.append(cmd)
        output = self.outputs[cmd[1]]
        if isinstance(output, Exception):
            raise output
        return output, ""


def test_list_installed():
    """Test parsing of pyenv versions --bare"""
    runner = RecordingRunner({"versions": "3.10.9\n\n3.11.4\n  3.12.1  \n"})
    manager = PyenvManager(root=Path("/opt/pyenv"), runner=runner)

    assert manager.list_installed() == ["3.10.9", "3.11.4", "3.12.1"]
    assert runner.commands == [["pyenv", "versions", "--bare", "--skip-aliases"]]


@pytest.mark.parametrize(
    "output,expected",
    [
        ("3.11.4\n", "3.11.4"),
        ("3.12.1\n3.11.4\n", "3.12.1"),
        ("system\n", None),
        ("", None),
    ],
)
def test_global_version(output, expected):
    """Test pyenv global output, where "system" means no managed global"""
    manager = PyenvManager(runner=RecordingRunner({"global": output}))

    assert manager.global_version() == expected


def test_errors_propagate():
    """Test a failing pyenv raises CommandError"""
    runner = RecordingRunner({"versions": CommandError("Command failed: pyenv versions")})

    with pytest.raises(CommandError):
        PyenvManager(runner=runner).list_installed()


def test_python_path_uses_root():
    """Test canonical interpreter path construction"""
    manager = PyenvManager(root=Path("/opt/pyenv"))

    assert manager.python_path("3.11.4") == str(
        Path("/opt/pyenv") / "versions" / "3.11.4" / "bin" / "python"
    )


def test_root_from_environment(monkeypatch, temp_dir):
    """Test $PYENV_ROOT and the ~/.pyenv default"""
    monkeypatch.setenv("PYENV_ROOT", str(temp_dir / "custom"))
    assert PyenvManager().root == temp_dir / "custom"

    monkeypatch.delenv("PYENV_ROOT")
    monkeypatch.setenv("HOME", str(temp_dir))
    assert PyenvManager().root == temp_dir / ".pyenv"


def test_detect():
    """Test pyenv is only used when it is on the search path"""
    assert PyenvManager.detect(FakeSystem()) is None

    manager = PyenvManager.detect(FakeSystem(binaries={"pyenv": None}))
    assert manager.command == "/usr/bin/pyenv"
