# UI components for environment management
from .console import console
from .style import StyleType, SymbolType

__all__ = [
    # Console
    "console",
    # Style
    "StyleType",
    "SymbolType",
]
