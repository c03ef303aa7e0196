"""Virtual environment materialization through ``python -m venv``"""

from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .exceptions import CommandError, MaterializeError
from .utils import run_command


class VenvBuilder:
    """Create virtual environments with a chosen interpreter"""

    def __init__(
        self, runner: Optional[Callable[[List[str]], Tuple[str, str]]] = None
    ):
        self.runner = runner or run_command

    def create(self, interpreter: str, target: Path) -> None:
        """
        Create a virtual environment

        Args:
            interpreter: Interpreter path or command name
            target: Directory of the new environment

        Raises:
            MaterializeError: If the venv module fails
        """
        try:
            self.runner([interpreter, "-m", "venv", str(target)])
        except CommandError as e:
            raise MaterializeError(
                f"Failed to create virtual environment at {target}",
                details=e.details or e.message,
            ) from e
