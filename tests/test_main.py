"""Tests for the command-line entry point."""

import logging
from unittest.mock import patch

import pytest

from poker_hand_evaluator import __version__
from poker_hand_evaluator.main import evaluate_hand_strings, main, parse_cards, setup_logging
from poker_hand_evaluator.models.hand import HandRank


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Run from an empty directory so no .env file is picked up."""
    monkeypatch.chdir(tmp_path)


class TestEvaluateHandStrings:
    """Test parsing and classification of card strings."""

    def test_royal_flush(self):
        assert evaluate_hand_strings(["As", "Ks", "Qs", "Js", "10s"]) == HandRank.ROYAL_FLUSH

    def test_wrong_size(self):
        assert evaluate_hand_strings(["As", "Ks"]) is None

    def test_invalid_card(self):
        with pytest.raises(ValueError):
            evaluate_hand_strings(["As", "Ks", "Qs", "Js", "1s"])

    def test_parse_cards(self):
        cards = parse_cards(["Ah", "T♦"])
        assert [str(c) for c in cards] == ["A♥", "10♦"]


class TestMain:
    """Test exit codes and output."""

    def test_classifies_hand(self, capsys):
        exit_code = main(["2c", "2d", "5h", "5s", "Kc"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "Two Pair"

    def test_too_few_cards(self, capsys):
        exit_code = main(["2c", "2d", "5h"])

        assert exit_code == 1
        assert capsys.readouterr().out.strip() == "Select 2 more card(s)"

    def test_no_cards(self, capsys):
        exit_code = main([])

        assert exit_code == 1
        assert capsys.readouterr().out.strip() == "Select 5 more card(s)"

    def test_too_many_cards(self, capsys):
        exit_code = main(["2c", "3c", "4c", "5c", "6c", "7c"])

        assert exit_code == 1
        assert capsys.readouterr().out.strip() == "You can only select 5 cards"

    def test_invalid_card_exits_with_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["2c", "2d", "5h", "5s", "Zz"])

        assert exc_info.value.code == 2
        assert "Invalid card string" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_log_level_override(self):
        with patch("poker_hand_evaluator.main.setup_logging") as mock_setup:
            main(["--log-level", "debug", "2c", "5d", "9h", "Js", "Kc"])

        mock_setup.assert_called_once_with("DEBUG")

    def test_log_level_from_config(self, tmp_path, monkeypatch: pytest.MonkeyPatch):
        config = tmp_path / "config.env"
        config.write_text("LOG_LEVEL=ERROR\n", encoding="utf-8")
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        with patch("poker_hand_evaluator.main.setup_logging") as mock_setup:
            main(["--config", str(config), "2c", "5d", "9h", "Js", "Kc"])

        mock_setup.assert_called_once_with("ERROR")


class TestSetupLogging:
    """Test logging configuration."""

    def test_sets_root_level(self):
        setup_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING

        setup_logging("info")
        assert logging.getLogger().level == logging.INFO
