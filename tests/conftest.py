"""
Shared pytest fixtures for evconf tests.

- isolate: fresh DI container and a private working directory per test
- write_conf: helper writing configuration files into tmp_path
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from evconf.core.bootstrap import reset


@pytest.fixture(autouse=True)
def isolate(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run every test from tmp_path with an un-bootstrapped container.

    Settings are searched from the working directory upwards, so tests
    must not pick up a settings file from the checkout.
    """
    for name in ("EVCONF_LOGGING__LEVEL", "EVCONF_LOGGING__CONSOLE", "EVCONF_PARSER__ENCODING"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset()
    yield
    reset()


@pytest.fixture
def write_conf(tmp_path: Path) -> Callable[..., Path]:
    """
    Provide a helper that writes a configuration file.

    Returns:
        A callable (text, name="test.conf") -> Path. Writing the same name
        again overwrites the file, which is how tests simulate an edit
        before a rehash.
    """

    def write(text: str, name: str = "test.conf") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return write
