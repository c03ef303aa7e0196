"""Command-line interface for virtual environment management"""

import sys

import click
from rich.panel import Panel

from . import __version__
from .commands import (
    activate,
    clean,
    config,
    create,
    delete,
    freeze,
    info,
    list_packages,
    versions,
    wizard,
)
from .core.config import Configuration
from .core.exceptions import ConfigError
from .core.version_checker import check_for_updates
from .ui.console import console, print_error
from .ui.style import DEFAULT_PANEL


class CliGroup(click.Group):
    """Command group with custom help formatting"""

    def format_help(self, ctx, formatter):
        """Format help message with styling"""
        console.print(
            Panel.fit(
                "\n".join(
                    [
                        "[bold blue]Environment Management:[/bold blue]",
                        f"  [cyan]create[/cyan]      [dim]Create a virtual environment[/dim] ([cyan]-p[/cyan]: python version, [cyan]-f[/cyan]: overwrite) (alias: [cyan]new[/cyan])",
                        f"  [cyan]wizard[/cyan]      [dim]Create a virtual environment step by step[/dim] (alias: [cyan]init[/cyan])",
                        f"  [cyan]versions[/cyan]    [dim]Show Python versions available for new environments[/dim]",
                        f"  [cyan]activate[/cyan]    [dim]Open a shell with the environment activated[/dim] (alias: [cyan]on[/cyan])",
                        f"  [cyan]info[/cyan]        [dim]Show environment information[/dim]",
                        f"  [cyan]delete[/cyan]      [dim]Delete a virtual environment[/dim] ([cyan]-y[/cyan]: no prompt) (alias: [cyan]rm[/cyan])",
                        "",
                        "[bold blue]Package Maintenance:[/bold blue]",
                        f"  [cyan]list[/cyan]        [dim]List installed packages[/dim] (alias: [cyan]ls[/cyan])",
                        f"  [cyan]freeze[/cyan]      [dim]Export packages in requirements format[/dim] ([cyan]-o[/cyan]: output file)",
                        f"  [cyan]clean[/cyan]       [dim]Purge pip's cache[/dim]",
                        "",
                        "[bold blue]Settings:[/bold blue]",
                        f"  [cyan]config[/cyan]      [dim]Show or update default name and base packages[/dim]",
                        "",
                        "[bold blue]Global Options:[/bold blue]",
                        f"  [cyan]--version[/cyan]   [dim]Show version number[/dim] ([cyan]alias: -V, -v[/cyan])",
                    ]
                ),
                title="venvctl - Python virtual environment manager",
                title_align=DEFAULT_PANEL.title_align,
                border_style=DEFAULT_PANEL.border_style,
                padding=(2, 2),
            )
        )


@click.group(cls=CliGroup)
@click.option(
    "--version",
    "-v",
    "-V",
    is_flag=True,
    help="Show version number",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: value
    and (console.print(f"venvctl {__version__}") or ctx.exit()),
)
@click.pass_context
def cli(ctx: click.Context):
    """venvctl - Python virtual environment manager"""
    ctx.ensure_object(dict)
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = Configuration.load()
        except ConfigError as e:
            print_error(e.message, e.details)
            sys.exit(1)

    if ctx.obj["config"].check_updates:
        check_for_updates()


# Register environment commands
cli.add_command(create)
cli.add_command(wizard)
cli.add_command(versions)
cli.add_command(activate)
cli.add_command(info)
cli.add_command(delete)

# Register package maintenance commands
cli.add_command(list_packages)
cli.add_command(freeze)
cli.add_command(clean)

# Register settings commands
cli.add_command(config)

# Register command aliases
cli.add_command(create, name="new")
cli.add_command(wizard, name="init")
cli.add_command(activate, name="on")
cli.add_command(delete, name="rm")
cli.add_command(list_packages, name="ls")


if __name__ == "__main__":
    cli()
