"""
Tests for the console game and logging setup.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from engine import Difficulty, Mark
from engine.logging_setup import setup_logging
from main import ConsoleGame


def test_self_play_reaches_an_end(capsys):
    game = ConsoleGame(Difficulty.MEDIUM, self_play=True, max_turns=40, seed=5)
    game.start()

    out = capsys.readouterr().out
    assert "GAME OVER!" in out
    assert len(game.game_state.moves) <= 40


def test_computer_first_opens_in_center():
    game = ConsoleGame(Difficulty.HARD, computer_first=True, seed=1)
    game.game_state.apply_computer_move(game.ai)
    assert game.game_state.board[4] == Mark.COMPUTER


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_setup_logging_console_only(monkeypatch, restore_root_logger):
    monkeypatch.delenv("LOG_FILE", raising=False)
    setup_logging("debug")

    assert restore_root_logger.level == logging.DEBUG
    assert [type(h) for h in restore_root_logger.handlers] == [logging.StreamHandler]


def test_setup_logging_with_file(monkeypatch, tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "engine.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    setup_logging()

    logging.getLogger("engine.test").warning("hello")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert restore_root_logger.level == logging.WARNING
    assert "| WARNING | engine.test | hello" in log_file.read_text(encoding="utf-8")
