"""
Tests for the evconf command line interface.
"""

import json
from unittest.mock import MagicMock

from click.testing import CliRunner

from evconf.cli import EvconfContext, __version__, cli
from evconf.core.models.parse import ChangeRecord

SERVER_CONF = """\
[ limits ]
max = 10
min = 1

[ cookies : sugar ]
favorite = 'snickerdoodle'
shapes = ['a'..'c']
"""


def make_context():
    """EvconfContext with mocked services."""
    settings = MagicMock()
    settings.parser.encoding = "utf-8"
    return EvconfContext(presenter=MagicMock(), logger=MagicMock(), settings=settings)


class TestGroup:
    """Tests for the top-level group."""

    def test_no_args_shows_help(self):
        result = CliRunner().invoke(cli, [])
        assert result.exit_code == 0
        assert "evconf check FILE" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_explicit_settings_file(self, tmp_path):
        settings = tmp_path / "settings.toml"
        settings.write_text('[logging]\nlevel = "debug"\n')
        conf = tmp_path / "server.conf"
        conf.write_text(SERVER_CONF)

        result = CliRunner().invoke(cli, ["--settings", str(settings), "check", str(conf)])

        assert result.exit_code == 0


class TestCheck:
    """Tests for evconf check."""

    def test_valid_file(self, write_conf):
        path = write_conf(SERVER_CONF)

        result = CliRunner().invoke(cli, ["check", str(path)])

        assert result.exit_code == 0
        assert f"{path}: OK (2 blocks, 4 keys, 7 lines)" in result.output

    def test_syntax_error_reports_location(self, write_conf):
        path = write_conf("[ limits ]\nnot a valid line\n")

        result = CliRunner().invoke(cli, ["check", str(path)])

        assert result.exit_code == 1
        assert f"{path}:2" in result.output
        assert "Error:" in result.output

    def test_missing_file(self, tmp_path):
        result = CliRunner().invoke(cli, ["check", str(tmp_path / "missing.conf")])
        assert result.exit_code == 1
        assert "cannot open configuration file" in result.output


class TestGet:
    """Tests for evconf get."""

    def test_unnamed_block(self, write_conf):
        result = CliRunner().invoke(cli, ["get", str(write_conf(SERVER_CONF)), "limits", "max"])
        assert result.exit_code == 0
        assert result.output.strip() == "10"

    def test_named_block(self, write_conf):
        result = CliRunner().invoke(cli, ["get", str(write_conf(SERVER_CONF)), "cookies:sugar", "favorite"])
        assert result.output.strip() == "'snickerdoodle'"

    def test_json(self, write_conf):
        result = CliRunner().invoke(cli, ["get", str(write_conf(SERVER_CONF)), "cookies:sugar", "shapes", "--json"])
        assert json.loads(result.output) == ["a", "b", "c"]

    def test_missing_key(self, write_conf):
        result = CliRunner().invoke(cli, ["get", str(write_conf(SERVER_CONF)), "limits", "nope"])
        assert result.exit_code == 0
        assert "nope: (not set)" in result.output


class TestShow:
    """Tests for evconf show."""

    def test_plain(self, write_conf):
        result = CliRunner().invoke(cli, ["show", str(write_conf(SERVER_CONF))])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "[ limits ]"
        assert "max = 10" in lines
        assert "[ cookies : sugar ]" in lines
        assert lines.index("[ limits ]") < lines.index("[ cookies : sugar ]")
        assert "shapes   = ['a', 'b', 'c']" in lines

    def test_json(self, write_conf):
        result = CliRunner().invoke(cli, ["show", "--json", str(write_conf(SERVER_CONF))])

        data = json.loads(result.output)
        assert data["section"]["limits"] == {"max": 10, "min": 1}
        assert data["cookies"]["sugar"]["favorite"] == "snickerdoodle"

    def test_empty_file(self, write_conf):
        result = CliRunner().invoke(cli, ["show", str(write_conf("# nothing here\n"))])
        assert "No blocks." in result.output


class TestDiff:
    """Tests for evconf diff."""

    def test_reports_changed_and_new_keys(self, write_conf):
        old = write_conf("[ limits ]\nmax = 10\nmin = 1\n", name="old.conf")
        new = write_conf("[ limits ]\nmax = 20\nmin = 1\nstep = 2\n", name="new.conf")

        result = CliRunner().invoke(cli, ["diff", str(old), str(new)])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == [
            "~ change:limits:max: 10 -> 20",
            "+ change:limits:step: (not set) -> 2",
            "2 change(s)",
        ]

    def test_removed_keys_not_reported(self, write_conf):
        old = write_conf("[ limits ]\nmax = 10\nmin = 1\n", name="old.conf")
        new = write_conf("[ limits ]\nmax = 10\n", name="new.conf")

        result = CliRunner().invoke(cli, ["diff", str(old), str(new)])

        assert result.output.strip() == "No changes."

    def test_error_in_new_file(self, write_conf):
        old = write_conf("[ limits ]\nmax = 10\n", name="old.conf")
        new = write_conf("[ limits ]\nmax = ???\n", name="new.conf")

        result = CliRunner().invoke(cli, ["diff", str(old), str(new)])

        assert result.exit_code == 1
        assert f"{new}:2" in result.output


class TestInjectedContext:
    """Tests with a mocked context object."""

    def test_diff_uses_presenter(self, write_conf):
        old = write_conf("[ a ]\nx = 1\n", name="old.conf")
        new = write_conf("[ a ]\nx = 2\n", name="new.conf")
        ctx = make_context()

        result = CliRunner().invoke(cli, ["diff", str(old), str(new)], obj=ctx)

        assert result.exit_code == 0
        ctx.presenter.print_change.assert_called_once()
        (change,) = ctx.presenter.print_change.call_args.args
        assert isinstance(change, ChangeRecord)
        assert (change.event_name, change.old, change.new) == ("change:a:x", 1, 2)
        ctx.presenter.print.assert_called_with("1 change(s)")

    def test_errors_go_to_presenter(self, tmp_path):
        ctx = make_context()

        result = CliRunner().invoke(cli, ["check", str(tmp_path / "missing.conf")], obj=ctx)

        assert result.exit_code == 1
        ctx.presenter.print_error.assert_called_once()
