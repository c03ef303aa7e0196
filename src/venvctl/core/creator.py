"""Create a virtual environment and install its packages"""

import shutil
from pathlib import Path
from typing import Callable, List, Optional

from .builder import VenvBuilder
from .config import Configuration
from .exceptions import AlreadyExistsError, InstallFailedError, PipError
from .models import CreationRequest, CreationResult
from .pip import PipWrapper
from .resolver import VersionResolver
from .system import SystemProbe
from .utils import get_env_python

PipFactory = Callable[[str], PipWrapper]


class EnvironmentCreator:
    """
    Run the creation steps for one environment.

    Every step is a hard gate. A failure after materialization leaves the
    partially built directory on disk.
    """

    def __init__(
        self,
        config: Configuration,
        resolver: VersionResolver,
        builder: VenvBuilder,
        system: SystemProbe,
        pip_factory: PipFactory = PipWrapper,
        cwd: Optional[Path] = None,
        on_step: Optional[Callable[[str], None]] = None,
    ):
        self.config = config
        self.resolver = resolver
        self.builder = builder
        self.system = system
        self.pip_factory = pip_factory
        self.cwd = Path(cwd) if cwd else Path.cwd()
        self.on_step = on_step

    def _step(self, message: str) -> None:
        if self.on_step:
            self.on_step(message)

    def _install(self, step: str, action: Callable[[], None]) -> None:
        try:
            action()
        except PipError as e:
            raise InstallFailedError(
                f"Failed to {step}", step=step, details=e.details or e.message
            ) from e

    def _remove(self, target: Path) -> None:
        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError as e:
            raise AlreadyExistsError(
                f"Cannot remove existing {target}", details=str(e)
            ) from e

    def create(self, request: CreationRequest) -> CreationResult:
        """
        Create the environment described by a request

        Raises:
            AlreadyExistsError: Target exists and force is not set
            NotFoundError: No interpreter matches the requested version
            MaterializeError: The venv module failed
            InstallFailedError: A pip step failed
        """
        target = self.cwd / request.name
        if target.exists() and not request.force:
            raise AlreadyExistsError(
                f"Environment already exists at {target}",
                details="Use --force to overwrite it",
            )

        self._step("Resolving Python interpreter...")
        interpreter = self.resolver.resolve(request.version)

        if target.exists():
            self._step(f"Removing existing environment {target}...")
            self._remove(target)

        self._step(f"Creating virtual environment with {interpreter}...")
        self.builder.create(interpreter.command, target)

        env_python = str(get_env_python(target))
        pip = self.pip_factory(env_python)

        self._step("Upgrading pip...")
        self._install("upgrade pip", pip.upgrade_self)

        installed: List[str] = []
        if request.install_base and self.config.packages:
            packages = list(self.config.packages)
            self._step(f"Installing base packages: {' '.join(packages)}...")
            self._install("install base packages", lambda: pip.install(packages))
            installed.extend(packages)

        if request.extra_packages:
            extras = list(request.extra_packages)
            self._step(f"Installing packages: {' '.join(extras)}...")
            self._install("install extra packages", lambda: pip.install(extras))
            installed.extend(extras)

        requirements = self.cwd / self.config.requirements_file
        requirements_installed = False
        if requirements.is_file():
            self._step(f"Installing {requirements.name}...")
            self._install(
                "install requirements",
                lambda: pip.install_requirements(requirements),
            )
            requirements_installed = True

        return CreationResult(
            path=target,
            interpreter=interpreter,
            python_version=self.system.python_version(env_python)
            or interpreter.version,
            installed_packages=installed,
            requirements_installed=requirements_installed,
        )
