"""
Click context extension for the evconf CLI.

EvconfContext carries the services commands need through ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.bootstrap import bootstrap
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from ..core.settings import EvconfSettings


@dataclass
class EvconfContext:
    """Services shared by all commands.

    Attributes:
        presenter: User-facing output
        logger: Diagnostic logger
        settings: Loaded evconf settings
    """

    presenter: IPresenter
    logger: ILogger
    settings: EvconfSettings

    @classmethod
    def create(cls, settings_path: str | None = None) -> EvconfContext:
        """Bootstrap the container and collect the services from it."""
        container = bootstrap(settings_path=Path(settings_path) if settings_path else None)
        return cls(
            presenter=container.resolve(IPresenter),  # type: ignore[type-abstract]
            logger=container.resolve(ILogger),  # type: ignore[type-abstract]
            settings=container.resolve(EvconfSettings),
        )
