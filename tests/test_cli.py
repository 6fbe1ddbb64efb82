"""Tests for the command-line entry point."""

import io

import pytest

from bill_manager import cli
from bill_manager.config import AppSettings


@pytest.fixture
def run_main(monkeypatch):
    """Run cli.main() over scripted stdin with default settings."""
    def _run(stdin_text):
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
        monkeypatch.setattr(cli, "get_settings", lambda: AppSettings(_env_file=None))
        # Leave global logging config alone
        monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)
        return cli.main()
    return _run


class TestMain:
    def test_exit_zero_on_empty_selection(self, run_main, capsys):
        assert run_main("1\nRent\n1200\n2\n\n") == cli.EXIT_OK

        out = capsys.readouterr().out
        assert "--Billing Application--" in out
        assert "Rent: 1200.00" in out

    def test_exit_zero_on_unrecognized_selection(self, run_main):
        assert run_main("q\n") == cli.EXIT_OK

    def test_long_name_does_not_end_session(self, run_main, capsys):
        name = "y" * 600
        assert run_main(f"1\n{name}\n5\n3\n{name}\n2\n\n") == cli.EXIT_OK

        out = capsys.readouterr().out
        assert "Bill removed" in out
        assert "No bills" in out

    def test_closed_stdin_is_an_error(self, run_main, capsys):
        assert run_main("1\nRent\n") == cli.EXIT_INPUT_ERROR
        assert "Input stream closed" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch):
        class InterruptingStdin(io.StringIO):
            def readline(self, *args):
                raise KeyboardInterrupt

        monkeypatch.setattr("sys.stdin", InterruptingStdin())
        monkeypatch.setattr(cli, "get_settings", lambda: AppSettings(_env_file=None))
        monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)

        assert cli.main() == cli.EXIT_INTERRUPTED
