"""
Unit tests for EvconfLogger, NullLogger and logger resolution.
"""

import logging

from evconf import Configuration
from evconf.core.bootstrap import bootstrap
from evconf.core.di import resolve_or_default
from evconf.core.interfaces.logger import ILogger
from evconf.services.logging import EvconfLogger, NullLogger


class TestEvconfLogger:
    """Tests for the stdlib-backed logger."""

    def test_console_output(self, capsys):
        logger = EvconfLogger(name="evconf.test.console", level="debug", console_enabled=True)

        logger.debug("parsed %s", "server.conf")

        err = capsys.readouterr().err
        assert "[DEBUG] evconf.test.console: parsed server.conf" in err

    def test_level_filters_output(self, capsys):
        logger = EvconfLogger(name="evconf.test.filter", level="error", console_enabled=True)

        logger.warning("hidden")
        logger.error("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "logs" / "evconf.log"
        logger = EvconfLogger(name="evconf.test.file", file_enabled=True, log_file=log_file)

        logger.warning("rehash failed")
        logger._file_handler.close()

        assert "rehash failed" in log_file.read_text()

    def test_set_level(self):
        logger = EvconfLogger(name="evconf.test.level")
        assert logger.level == logging.WARNING

        logger.set_level("DEBUG")
        assert logger.level == logging.DEBUG

        logger.set_level("unknown")
        assert logger.level == logging.WARNING

    def test_propagates_without_own_output(self, caplog):
        logger = EvconfLogger(name="evconf.test.propagate", level="info")

        with caplog.at_level(logging.INFO, logger="evconf.test.propagate"):
            logger.info("host sees this")

        assert "host sees this" in caplog.text

    def test_owning_output_stops_propagation(self):
        EvconfLogger(name="evconf.test.owner", console_enabled=True)
        assert logging.getLogger("evconf.test.owner").propagate is False

        EvconfLogger(name="evconf.test.owner")
        assert logging.getLogger("evconf.test.owner").propagate is True


class TestNullLogger:
    """Tests for the no-op logger."""

    def test_accepts_every_call(self):
        logger = NullLogger()
        logger.debug("x %s", 1)
        logger.info("x")
        logger.warning("x")
        logger.error("x")
        logger.set_level("debug")


class TestResolution:
    """Tests for how library code finds its logger."""

    def test_null_logger_before_bootstrap(self):
        assert isinstance(resolve_or_default(ILogger, NullLogger), NullLogger)

    def test_configured_logger_after_bootstrap(self):
        bootstrap()
        assert isinstance(resolve_or_default(ILogger, NullLogger), EvconfLogger)

    def test_rehash_failure_is_logged(self, tmp_path, caplog):
        bootstrap()
        conf = Configuration(tmp_path / "gone.conf")

        with caplog.at_level(logging.WARNING, logger="evconf"):
            assert conf.rehash() is False

        assert "Rehash of" in caplog.text
        assert "gone.conf" in caplog.text

    def test_changes_logged_at_debug(self, tmp_path, caplog, monkeypatch):
        monkeypatch.setenv("EVCONF_LOGGING__LEVEL", "debug")
        path = tmp_path / "test.conf"
        path.write_text("[ limits ]\nmax = 10\n")
        bootstrap()

        with caplog.at_level(logging.DEBUG, logger="evconf"):
            Configuration(path).parse_config()

        assert "change:limits:max: None -> 10 (line 2)" in caplog.text
