"""Custom exceptions for virtual environment management"""

from typing import Optional


class VenvCtlError(Exception):
    """Base exception for venvctl"""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(VenvCtlError):
    """No matching interpreter or environment"""

    pass


class AlreadyExistsError(VenvCtlError):
    """Target directory exists and overwrite was not requested"""

    pass


class InvalidSelectionError(VenvCtlError):
    """Interactive menu choice is out of range"""

    pass


class MaterializeError(VenvCtlError):
    """Virtual environment could not be created"""

    pass


class InstallFailedError(VenvCtlError):
    """A package or tool installation step failed"""

    def __init__(
        self, message: str, step: str, details: Optional[str] = None
    ):
        super().__init__(message, details=details)
        self.step = step


class CommandError(VenvCtlError):
    """External command returned a non-zero exit status"""

    pass


class PipError(CommandError):
    """Pip command errors"""

    pass


class ConfigError(VenvCtlError):
    """Configuration file could not be read"""

    pass
