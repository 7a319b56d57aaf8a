"""
Native Click implementation of the show command.

Usage: evconf show FILE [--json]
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from ...configuration import Configuration
from ...core.models.events import SECTION
from ..decorators import report_errors

if TYPE_CHECKING:
    from ..context import EvconfContext


@click.command("show")
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Dump the store as JSON")
@click.pass_obj
@report_errors
def show(ctx: EvconfContext, file: str, as_json: bool) -> None:
    """Print every block of a configuration file.

    Unnamed blocks come first, then named blocks by type and name.
    """
    conf = Configuration(file, encoding=ctx.settings.parser.encoding)
    conf.parse_config()
    data = conf.store.as_dict()

    if as_json:
        ctx.presenter.print(json.dumps(data, indent=2, sort_keys=True))
        return

    if not data:
        ctx.presenter.print("No blocks.")
        return

    # "section" sorts before every other type
    for block_type in sorted(data, key=lambda t: (t != SECTION, t)):
        for block_name in sorted(data[block_type]):
            ctx.presenter.print_block(block_type, block_name, data[block_type][block_name])
