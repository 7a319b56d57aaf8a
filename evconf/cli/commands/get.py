"""
Native Click implementation of the get command.

Usage: evconf get FILE BLOCK KEY
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from ...configuration import Configuration
from ...presenters.formatting import format_value, parse_block_argument
from ..decorators import report_errors

if TYPE_CHECKING:
    from ..context import EvconfContext


@click.command("get")
@click.argument("file", type=click.Path(dir_okay=False))
@click.argument("block")
@click.argument("key")
@click.option("--json", "as_json", is_flag=True, help="Print the value as JSON")
@click.pass_obj
@report_errors
def get(ctx: EvconfContext, file: str, block: str, key: str, as_json: bool) -> None:
    """Print one configuration value.

    \b
    Arguments:
        FILE   Configuration file
        BLOCK  Block name, or type:name for named blocks
        KEY    Key within the block

    \b
    Examples:
        evconf get server.conf limits max
        evconf get server.conf cookies:sugar favorite --json
    """
    conf = Configuration(file, encoding=ctx.settings.parser.encoding)
    conf.parse_config()

    value = conf.get(parse_block_argument(block), key)
    if as_json:
        ctx.presenter.print(json.dumps(value))
    elif value is None:
        ctx.presenter.print(f"{key}: (not set)")
    else:
        ctx.presenter.print(format_value(value))
