import pytest

from jigsawgrid.data import PuzzlePieceData
from jigsawgrid.game import GameMode


@pytest.fixture
def pieces():
    return [PuzzlePieceData(f"p{i}", (i, 0)) for i in range(3)]


def test_begin_play_registers_all_pieces_false(pieces):
    game = GameMode(pieces)
    game.begin_play()
    assert game.piece_control == {p: False for p in pieces}


def test_no_win_until_all_correct(pieces):
    wins = []
    game = GameMode(pieces, on_win=lambda: wins.append(True))
    game.begin_play()
    for data in pieces[:-1]:
        game.mark_piece(data, data.correct_coord)
    assert game.check_win_condition() is False
    assert wins == []


def test_win_when_all_correct(pieces):
    wins = []
    game = GameMode(pieces, on_win=lambda: wins.append(True))
    game.begin_play()
    for data in pieces:
        game.mark_piece(data, data.correct_coord)
    assert game.check_win_condition() is True
    assert wins == [True]


def test_mark_piece_can_undo_correct(pieces):
    game = GameMode(pieces)
    game.begin_play()
    data = pieces[0]
    game.mark_piece(data, data.correct_coord)
    assert game.piece_control[data] is True
    game.mark_piece(data, (9, 9))
    assert game.piece_control[data] is False


def test_mark_unknown_piece_raises(pieces):
    game = GameMode(pieces)
    game.begin_play()
    with pytest.raises(KeyError):
        game.mark_piece(PuzzlePieceData("stranger", (0, 0)), (0, 0))


def test_mark_before_begin_play_raises(pieces):
    game = GameMode(pieces)
    with pytest.raises(KeyError):
        game.mark_piece(pieces[0], (0, 0))


def test_move_count(pieces):
    game = GameMode(pieces)
    assert game.move_count == 0
    for _ in range(4):
        game.increase_move_count()
    assert game.move_count == 4


def test_empty_game_is_won_without_callback():
    game = GameMode()
    game.begin_play()
    assert game.check_win_condition() is True


def test_grid_reference_starts_unset(pieces):
    game = GameMode(pieces)
    assert game.grid is None
    assert game.pieces == pieces