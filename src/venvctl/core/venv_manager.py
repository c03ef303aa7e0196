"""Operations on existing virtual environments"""

import os
import shutil
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

from .exceptions import NotFoundError
from .pip import PipWrapper
from .system import SystemProbe
from .utils import get_activate_script, get_env_python, is_valid_venv


class VenvManager:
    """Manager for virtual environment operations"""

    def __init__(
        self,
        system: Optional[SystemProbe] = None,
        pip_factory: Callable[[str], PipWrapper] = PipWrapper,
    ):
        """Initialize VenvManager"""
        self.system = system or SystemProbe()
        self.pip_factory = pip_factory
        self.from_env = self._get_current_env()

    def _get_current_env(self) -> Optional[Path]:
        """Get the current virtual environment"""
        if "VIRTUAL_ENV" in os.environ:
            env_path = Path(os.environ["VIRTUAL_ENV"])
            if env_path.exists() and get_activate_script(env_path).exists():
                return env_path
        return None

    def _get_shell(self) -> Tuple[str, str]:
        """Get shell executable and name"""
        shell = os.environ.get("SHELL", "/bin/sh")
        shell_name = os.path.basename(shell)
        return shell, shell_name

    def find(self, name: str) -> Path:
        """
        Locate an existing environment

        Raises:
            NotFoundError: If the directory is not a virtual environment
        """
        venv_path = Path(name)
        if not is_valid_venv(venv_path):
            raise NotFoundError(f"No virtual environment found at {venv_path}")
        return venv_path

    def get_environment_info(self, venv_path: Path) -> Dict[str, Any]:
        """Collect interpreter, pip and package details of an environment"""
        python_path = get_env_python(venv_path)
        pip = self.pip_factory(str(python_path))
        return {
            "name": venv_path.name,
            "project_name": venv_path.resolve().parent.name,
            "path": str(venv_path.resolve()),
            "python": {
                "path": str(python_path),
                "version": self.system.python_version(str(python_path)),
            },
            "pip": {"version": pip.version()},
            "is_active": bool(
                self.from_env and self.from_env.resolve() == venv_path.resolve()
            ),
        }

    def delete_environment(self, venv_path: Path) -> None:
        """Remove an environment directory"""
        self.find(str(venv_path))
        shutil.rmtree(venv_path)

    def _get_activation_exports(
        self, env_path: Path, shell_name: str
    ) -> Tuple[Dict[str, str], str]:
        """Get environment variables and prompt command for activation"""
        project_name = env_path.resolve().parent.name
        env_vars = {
            "VIRTUAL_ENV": str(env_path.resolve()),
            "PATH": f"{get_env_python(env_path.resolve()).parent}"
            f"{os.pathsep}{os.environ.get('PATH', '')}",
        }

        # Remove PYTHONHOME if exists
        if "PYTHONHOME" in os.environ:
            env_vars["PYTHONHOME"] = ""

        if shell_name == "zsh":
            ps1_cmd = f'export PROMPT="({project_name}({env_path.name})) $PROMPT"'
        else:
            # Assume bash/sh compatible
            ps1_cmd = f'export PS1="({project_name}({env_path.name})) $PS1"'
        return env_vars, ps1_cmd

    def prepare_activation(
        self, venv_path: Path
    ) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        """
        Prepare environment activation

        Returns:
            Tuple of (shell, shell_name, shell_command), all None when the
            environment is already active
        """
        activate_script = get_activate_script(venv_path)
        if not activate_script.exists():
            raise NotFoundError(
                f"Activation script not found at {activate_script}"
            )

        if self.from_env and self.from_env.resolve() == venv_path.resolve():
            return None, None, None

        shell, shell_name = self._get_shell()
        env_vars, ps1_cmd = self._get_activation_exports(venv_path, shell_name)
        exports = " ".join(f"export {k}='{v}';" for k, v in env_vars.items())
        shell_command = f"{exports} {ps1_cmd} && exec {shell}"
        return shell, shell_name, shell_command

    def activate_environment(self, venv_path: Path) -> bool:
        """
        Replace the current process with an activated subshell

        Returns:
            False if the environment is already active
        """
        shell, shell_name, shell_command = self.prepare_activation(venv_path)
        if not shell_command:
            return False
        os.execl(shell, shell_name, "-c", shell_command)
        return True
