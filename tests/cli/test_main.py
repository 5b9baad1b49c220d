"""Tests for the command-line entry point."""

import pytest
import structlog

from contacts_app.cli import main as main_module
from contacts_app.cli.main import build_parser, cli_overrides, main


@pytest.fixture(autouse=True)
def reset_structlog():
    """main() configures structlog globally."""
    yield
    structlog.reset_defaults()


class TestCliOverrides:
    """Test option to configuration mapping."""

    def test_no_options(self):
        """Without logging options there are no overrides."""
        args = build_parser().parse_args([])

        assert cli_overrides(args) == {}

    def test_logging_options(self):
        """Logging options map onto the logging section."""
        args = build_parser().parse_args(["--log-level", "DEBUG", "--log-json"])

        assert cli_overrides(args) == {"logging": {"level": "DEBUG", "format_json": True}}


class TestMain:
    """Test main()."""

    def test_capacity_option_skips_prompt(self, monkeypatch, tmp_path, capsys):
        """--capacity builds the directory directly and the menu runs."""
        answers = iter(["8", "0"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        assert main(["--config-dir", str(tmp_path), "--capacity", "3"]) == 0

        out = capsys.readouterr().out
        assert "Capacity: 3" in out
        assert "Goodbye" in out

    def test_invalid_config_exits_2(self, tmp_path, capsys):
        """Invalid configuration is reported on stderr."""
        (tmp_path / "contacts.yaml").write_text("directory:\n  default_capacity: -1\n")

        assert main(["--config-dir", str(tmp_path)]) == 2
        assert "Configuration error" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch, tmp_path):
        """Ctrl-C during the session ends the program with status 130."""
        class InterruptedSession:
            def __init__(self, directory):
                self.directory = directory

            def run(self):
                raise KeyboardInterrupt

        monkeypatch.setattr(main_module, "MenuSession", InterruptedSession)

        assert main(["--config-dir", str(tmp_path), "--capacity", "2"]) == 130
