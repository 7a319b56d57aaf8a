"""
Native Click implementation of the check command.

Usage: evconf check FILE
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ...configuration import Configuration
from ..decorators import report_errors

if TYPE_CHECKING:
    from ..context import EvconfContext


@click.command("check")
@click.argument("file", type=click.Path(dir_okay=False))
@click.pass_obj
@report_errors
def check(ctx: EvconfContext, file: str) -> None:
    """Validate a configuration file.

    Exits with status 1 and prints FILE:LINE of the first error if the
    file does not parse.
    """
    conf = Configuration(file, encoding=ctx.settings.parser.encoding)
    result = conf.parse_config()

    data = conf.store.as_dict()
    key_count = sum(len(entries) for blocks in data.values() for entries in blocks.values())
    ctx.presenter.print(f"{file}: OK ({len(conf.store)} blocks, {key_count} keys, {result.lines_read} lines)")
