"""
Click-based CLI for evconf.

Usage:
    from evconf.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from ..core.exceptions import EvconfException
from .context import EvconfContext

try:
    from importlib.metadata import version

    __version__ = version("evconf")
except Exception:
    __version__ = "3.2.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="evconf")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, exists=True),
    default=None,
    help="evconf settings TOML file (default: search .evconf/config.toml upwards)",
)
@click.pass_context
def cli(ctx: click.Context, settings_path: str | None) -> None:
    """evconf - event-driven configuration files

    Parse block-structured configuration files and inspect the change
    events a reload would fire.

    \b
    Commands:
        evconf check FILE              Validate a configuration file
        evconf get FILE BLOCK KEY      Print one value (BLOCK is name or type:name)
        evconf show FILE               Print every block
        evconf diff OLD NEW            Print the change events of reloading OLD as NEW
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif not isinstance(ctx.obj, EvconfContext):
        try:
            ctx.obj = EvconfContext.create(settings_path=settings_path)
        except EvconfException as e:
            raise click.ClickException(str(e)) from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "EvconfContext",
    "__version__",
    "cli",
    "register_commands",
]
