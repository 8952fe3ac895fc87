"""
Tests for win and stalemate detection.
"""

import pytest

from engine import Mark, WinChecker, new_board, parse_board


@pytest.fixture
def checker():
    return WinChecker()


@pytest.mark.parametrize("text, line", [
    ("XXXOO.O..", (0, 1, 2)),   # row
    ("O.XO.XOX.", (0, 3, 6)),   # column
    ("X.O.XO..X", (0, 4, 8)),   # diagonal
    ("X.O.OXO..", (2, 4, 6)),   # anti-diagonal
])
def test_winning_lines(checker, text, line):
    board = parse_board(text)
    mark = board[line[0]]
    assert checker.is_winning_for(board, mark)
    assert not checker.is_winning_for(board, mark.opposite())
    assert checker.check_winner(board) == mark
    assert checker.get_winning_line(board) == line


def test_no_winner(checker):
    board = parse_board("XO..X..O.")
    assert checker.check_winner(board) is None
    assert checker.get_winning_line(board) is None
    assert not checker.is_winning_for(board, Mark.PLAYER)
    assert not checker.is_winning_for(new_board(), Mark.COMPUTER)


def test_has_any_legal_move(checker):
    board = parse_board("OX.XX....")
    assert not checker.has_any_legal_move(board, Mark.COMPUTER)
    assert checker.has_any_legal_move(board, Mark.PLAYER)


def test_stalemate(checker):
    board = parse_board("OX.XX....")
    assert checker.is_stalemate(board, Mark.COMPUTER)
    assert not checker.is_stalemate(board, Mark.PLAYER)


def test_no_pieces_is_not_stalemate(checker):
    assert not checker.is_stalemate(new_board(), Mark.PLAYER)
    assert not checker.has_any_legal_move(new_board(), Mark.PLAYER)
