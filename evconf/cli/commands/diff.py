"""
Native Click implementation of the diff command.

Usage: evconf diff OLD NEW
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ...configuration import Configuration
from ..decorators import report_errors

if TYPE_CHECKING:
    from ..context import EvconfContext


@click.command("diff")
@click.argument("old", type=click.Path(dir_okay=False))
@click.argument("new", type=click.Path(dir_okay=False))
@click.pass_obj
@report_errors
def diff(ctx: EvconfContext, old: str, new: str) -> None:
    """Show the change events a reload from OLD to NEW would fire.

    OLD is loaded first; NEW is then parsed into the same store, exactly
    like a rehash. Keys missing from NEW keep their old values and are
    not reported.

    \b
    Output:
        + change:limits:max: (not set) -> 10    key is new
        ~ change:limits:max: 10 -> 20           key changed
    """
    encoding = ctx.settings.parser.encoding
    before = Configuration(old, encoding=encoding)
    before.parse_config()

    after = Configuration(new, before.store, encoding=encoding)
    result = after.parse_config()

    if not result.changed:
        ctx.presenter.print("No changes.")
        return

    for change in result.changes:
        ctx.presenter.print_change(change)
    ctx.presenter.print(f"{len(result.changes)} change(s)")
