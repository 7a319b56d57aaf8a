"""
Click decorators for evconf CLI commands.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

from ..core.exceptions import EvconfException

if TYPE_CHECKING:
    from .context import EvconfContext

F = TypeVar("F", bound=Callable[..., Any])


def report_errors(f: F) -> F:
    """Decorator turning evconf errors into an error message and exit code.

    Usage:
        @click.command()
        @click.pass_obj
        @report_errors
        def check(ctx: EvconfContext, file: str):
            ...

    Note:
        Apply AFTER @click.pass_obj so the EvconfContext is the first argument.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx_maybe: Any = args[0] if args else kwargs.get("ctx")
        if ctx_maybe is None:
            raise click.ClickException(
                "Internal error: EvconfContext not available. "
                "Ensure @click.pass_obj is applied before @report_errors."
            )
        ctx: EvconfContext = ctx_maybe

        try:
            return f(*args, **kwargs)
        except EvconfException as e:
            ctx.logger.debug("Command failed: %s", e)
            ctx.presenter.print_error(str(e))
            raise SystemExit(e.exit_code) from e

    return wrapper  # type: ignore[return-value]
