"""Persisted user defaults"""

import os
import tempfile
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional, Union

import tomlkit
from tomlkit.exceptions import TOMLKitError

from .exceptions import ConfigError

CONFIG_ENV_VAR = "VENVCTL_CONFIG"
DEFAULT_PACKAGES = ["setuptools", "wheel"]


def default_config_path() -> Path:
    """Get the config file location, honouring $VENVCTL_CONFIG"""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "venvctl" / "config.toml"


@dataclass
class Configuration:
    """Defaults used when creating environments"""

    env_name: str = "env"
    packages: List[str] = field(default_factory=lambda: list(DEFAULT_PACKAGES))
    requirements_file: str = "requirements.txt"
    check_updates: bool = True

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "Configuration":
        """
        Load configuration, falling back to defaults when the file is missing

        Raises:
            ConfigError: If the file exists but cannot be parsed
        """
        path = Path(path) if path else default_config_path()
        if not path.exists():
            return cls()

        try:
            with path.open("r", encoding="utf-8") as f:
                data = tomlkit.parse(f.read()).unwrap()
        except (OSError, TOMLKitError) as e:
            raise ConfigError(
                f"Failed to read configuration: {path}", details=str(e)
            ) from e

        config = cls()
        if isinstance(data.get("env_name"), str) and data["env_name"].strip():
            config.env_name = data["env_name"].strip()
        if isinstance(data.get("packages"), list):
            config.packages = [str(pkg) for pkg in data["packages"] if pkg]
        if isinstance(data.get("requirements_file"), str):
            config.requirements_file = data["requirements_file"]
        if isinstance(data.get("check_updates"), bool):
            config.check_updates = data["check_updates"]
        return config

    def save(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Write the whole configuration, replacing the file atomically"""
        path = Path(path) if path else default_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)

        doc = tomlkit.document()
        for item in fields(self):
            doc[item.name] = getattr(self, item.name)

        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(tomlkit.dumps(doc))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return path
