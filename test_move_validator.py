"""
Tests for move validation.
"""

import pytest

from engine import GameState, Mark, MoveValidator, Phase, Placement, Slide, parse_board


@pytest.fixture
def validator():
    return MoveValidator()


def movement_game(text, current_player=Mark.PLAYER):
    return GameState(
        board=parse_board(text),
        phase=Phase.MOVEMENT,
        current_player=current_player,
        player_pieces=3,
        computer_pieces=3,
    )


def test_valid_placement(validator):
    result = validator.validate_placement(GameState(), 4)
    assert result.is_valid
    assert result.error_message is None


@pytest.mark.parametrize("cell, message", [
    (4, "already occupied"),
    (-1, "Invalid cell"),
    (9, "Invalid cell"),
    ("4", "Invalid cell"),
])
def test_invalid_placement(validator, cell, message):
    game = GameState(board=parse_board("....X...."))
    result = validator.validate_placement(game, cell)
    assert not result.is_valid
    assert message in result.error_message


def test_placement_quota(validator):
    game = GameState(board=parse_board("XXX......"), player_pieces=3)
    result = validator.validate_placement(game, 5)
    assert not result.is_valid
    assert "no more pieces" in result.error_message


def test_placement_in_movement_phase(validator):
    result = validator.validate_placement(movement_game("XO.XO.XO."), 2)
    assert not result.is_valid


def test_nothing_is_valid_after_game_over(validator):
    game = GameState(is_game_over=True)
    assert not validator.validate_placement(game, 0).is_valid
    assert validator.get_valid_moves(game) == []


@pytest.mark.parametrize("source, destination, valid", [
    (3, 6, True),
    (4, 8, True),
    (0, 8, False),      # not adjacent
    (1, 2, False),      # O's piece
    (0, 3, False),      # occupied
    (0, 9, False),      # off the board
])
def test_validate_slide(validator, source, destination, valid):
    # X on 0, 3, 4; O on 1, 5, 7
    game = movement_game("XO.XXO.O.")
    assert validator.validate_slide(game, source, destination).is_valid is valid


def test_slide_in_placement_phase(validator):
    game = GameState(board=parse_board("X........"))
    assert not validator.validate_slide(game, 0, 1).is_valid


def test_get_valid_moves_placement(validator):
    game = GameState(board=parse_board("XO......."), player_pieces=1, computer_pieces=1)
    moves = validator.get_valid_moves(game)
    assert moves == [Placement(cell) for cell in range(2, 9)]


def test_get_valid_moves_movement(validator):
    game = movement_game("OX.XX....", current_player=Mark.COMPUTER)
    assert validator.get_valid_moves(game) == []

    game = movement_game("O...X....")
    assert validator.get_valid_moves(game) == [
        Slide(4, to) for to in (1, 2, 3, 5, 6, 7, 8)
    ]
