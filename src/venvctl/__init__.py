"""venvctl - create, activate and maintain Python virtual environments"""

__version__ = "0.1.0"
