"""The external tools venvctl drives, bundled for injection"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .builder import VenvBuilder
from .catalog import VersionCatalog
from .config import Configuration
from .creator import EnvironmentCreator
from .pip import PipWrapper
from .pyenv import PyenvManager
from .resolver import VersionResolver
from .system import SystemProbe
from .venv_manager import VenvManager
from .wizard import InteractiveWizard


@dataclass
class Toolchain:
    system: SystemProbe
    version_manager: Optional[PyenvManager]
    builder: VenvBuilder
    pip_factory: Callable[[str], PipWrapper] = PipWrapper

    @classmethod
    def detect(cls) -> "Toolchain":
        """Build a toolchain for the running system"""
        system = SystemProbe()
        return cls(
            system=system,
            version_manager=PyenvManager.detect(system),
            builder=VenvBuilder(),
        )

    def resolver(self) -> VersionResolver:
        return VersionResolver(self.system, self.version_manager)

    def catalog(self) -> VersionCatalog:
        return VersionCatalog(self.system, self.version_manager)

    def creator(
        self,
        config: Configuration,
        cwd: Optional[Path] = None,
        on_step: Optional[Callable[[str], None]] = None,
    ) -> EnvironmentCreator:
        return EnvironmentCreator(
            config,
            self.resolver(),
            self.builder,
            self.system,
            pip_factory=self.pip_factory,
            cwd=cwd,
            on_step=on_step,
        )

    def wizard(self, config: Configuration) -> InteractiveWizard:
        return InteractiveWizard(config, self.catalog())

    def venv_manager(self) -> VenvManager:
        return VenvManager(self.system, self.pip_factory)

    def pip(self, python_path: Optional[str] = None) -> PipWrapper:
        return self.pip_factory(python_path)
