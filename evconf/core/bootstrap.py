"""
Application bootstrap for evconf.

Registers settings, the logger and the CLI presenter in the DI container.
Library users may call bootstrap() to get logging configured from settings;
without it evconf logs nothing.
"""

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter
from .settings import EvconfSettings, load_settings

_initialized = False


def bootstrap(settings_path: Path | None = None, start_dir: str | None = None) -> ServiceContainer:
    """
    Bootstrap evconf services.

    Args:
        settings_path: Optional explicit settings TOML file
        start_dir: Directory to search for settings from (default: cwd)

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container, settings_path, start_dir)

    _initialized = True
    return container


def _register_core_services(
    container: ServiceContainer,
    settings_path: Path | None,
    start_dir: str | None,
) -> None:
    """Register core application services."""
    from ..presenters.console import ConsolePresenter
    from ..services.logging import EvconfLogger

    container.register_singleton(
        EvconfSettings,
        factory=lambda: load_settings(config_path=settings_path, start_dir=start_dir),
    )
    container.register_singleton(IPresenter, implementation=ConsolePresenter())  # type: ignore[type-abstract]

    def create_logger() -> ILogger:
        settings: EvconfSettings = container.resolve(EvconfSettings)
        return EvconfLogger(
            level=settings.logging.level,
            console_enabled=settings.logging.console,
            file_enabled=settings.logging.file,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if evconf has been bootstrapped."""
    return _initialized
