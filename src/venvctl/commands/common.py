"""Helpers shared by command implementations"""

import functools
import sys

import click

from ..core.config import Configuration
from ..core.exceptions import VenvCtlError
from ..core.toolchain import Toolchain
from ..ui.console import console, print_error


def get_config() -> Configuration:
    """Configuration loaded by the command group"""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    if "config" not in ctx.obj:
        ctx.obj["config"] = Configuration.load()
    return ctx.obj["config"]


def get_toolchain() -> Toolchain:
    """Toolchain for this invocation, detected on first use"""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    if "toolchain" not in ctx.obj:
        ctx.obj["toolchain"] = Toolchain.detect()
    return ctx.obj["toolchain"]


def handle_errors(func):
    """Report venvctl errors and exit with status 1"""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except VenvCtlError as e:
            print_error(e.message, e.details)
            sys.exit(1)
        except KeyboardInterrupt:
            console.print("\n[yellow]Operation cancelled[/yellow]")
            sys.exit(1)

    return wrapper
