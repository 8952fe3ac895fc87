"""
Tests for the board model: tables, parsing, move generation and trial moves.
"""

import numpy as np
import pytest

from engine.board import (
    ADJACENCY, LINES_THROUGH, MOVEMENT_RULES, POSITION_VALUES, WINNING_LINES,
    Mark, Slide,
    check_board, empty_cells, format_board, is_legal_slide, legal_destinations, legal_slides,
    new_board, parse_board, pieces_of, trial_placement, trial_slide,
)


def test_adjacency_matches_movement_rules():
    assert np.array_equal(ADJACENCY, ADJACENCY.T)
    assert not ADJACENCY.diagonal().any()
    # 8 outer cells with 3 neighbours each, plus the center's 8
    assert ADJACENCY.sum() == 32
    for source, targets in enumerate(MOVEMENT_RULES):
        assert set(np.flatnonzero(ADJACENCY[source])) == set(targets)


def test_static_tables_are_read_only():
    with pytest.raises(ValueError):
        ADJACENCY[0, 8] = True
    with pytest.raises(ValueError):
        POSITION_VALUES[4] = 0


def test_position_values():
    assert POSITION_VALUES.tolist() == [6, 4, 6, 4, 10, 4, 6, 4, 6]


def test_winning_lines():
    assert WINNING_LINES.shape == (8, 3)
    assert [len(lines) for lines in LINES_THROUGH] == [3, 2, 3, 2, 4, 2, 3, 2, 3]
    assert (0, 4, 8) in LINES_THROUGH[8]


def test_parse_and_format_board():
    board = parse_board("XX..O....")
    assert board[:5] == [Mark.PLAYER, Mark.PLAYER, None, None, Mark.COMPUTER]
    assert format_board(board) == "XX..O...."
    assert parse_board("xo-|_ .|...") == [Mark.PLAYER, Mark.COMPUTER] + [None] * 7


@pytest.mark.parametrize("board", [[None] * 8, [None] * 10, ["O"] + [None] * 8])
def test_check_board_rejects_bad_boards(board):
    with pytest.raises(ValueError):
        check_board(board)


def test_check_board_accepts_parsed_board():
    check_board(parse_board("XX..O...."))


@pytest.mark.parametrize("text", ["XX..O...", "XX..O.....", "XX..Q...."])
def test_parse_board_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_board(text)


def test_cell_queries():
    board = parse_board("XX..O....")
    assert empty_cells(board) == [2, 3, 5, 6, 7, 8]
    assert pieces_of(board, Mark.PLAYER) == [0, 1]
    assert pieces_of(board, Mark.COMPUTER) == [4]
    assert empty_cells(new_board()) == list(range(9))


def test_legal_slides_follow_movement_rule_order():
    board = parse_board("O...X....")
    assert legal_destinations(board, 0) == [3, 1]
    assert legal_slides(board, Mark.COMPUTER) == [Slide(0, 3), Slide(0, 1)]
    assert legal_slides(board, Mark.PLAYER) == [
        Slide(4, to) for to in (1, 2, 3, 5, 6, 7, 8)
    ]


def test_is_legal_slide():
    board = parse_board("O...X....")
    assert is_legal_slide(board, 0, 1, Mark.COMPUTER) is True
    assert is_legal_slide(board, 0, 4, Mark.COMPUTER) is False   # occupied
    assert is_legal_slide(board, 0, 8, Mark.COMPUTER) is False   # not adjacent
    assert is_legal_slide(board, 0, 1, Mark.PLAYER) is False     # not X's piece


def test_trial_slide_restores_board():
    board = parse_board("O...X....")
    before = list(board)

    with trial_slide(board, 0, 1):
        assert format_board(board) == ".O..X...."
    assert board == before

    for to in (3, 1):
        with trial_slide(board, 0, to):
            break
    assert board == before


def test_trial_slide_restores_on_exception():
    board = parse_board("O...X....")
    before = list(board)

    with pytest.raises(RuntimeError):
        with trial_slide(board, 4, 8):
            raise RuntimeError("boom")
    assert board == before


def test_trial_placement_restores_board():
    board = parse_board("X........")
    with trial_placement(board, 4, Mark.COMPUTER):
        assert board[4] is Mark.COMPUTER
    assert format_board(board) == "X........"
