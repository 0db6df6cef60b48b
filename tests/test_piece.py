from jigsawgrid.data import PuzzlePieceData
from jigsawgrid.piece import PuzzlePiece


def make_piece(**kwargs):
    return PuzzlePiece(PuzzlePieceData("p", (1, 2)), **kwargs)


def test_new_piece_is_not_placed():
    piece = make_piece()
    assert piece.placed_before is False
    assert piece.grid_point == (0, 0)
    assert piece.button is None


def test_default_spawn_location():
    assert make_piece().location == (0.0, 0.0, 100.0)


def test_set_grid_point_marks_placed():
    piece = make_piece(location=(5.0, 6.0, 7.0))
    piece.set_grid_point((3, 4))
    assert piece.grid_point == (3, 4)
    assert piece.placed_before is True
    assert piece.location == (5.0, 6.0, 7.0)


def test_set_grid_point_zero_still_marks_placed():
    piece = make_piece()
    piece.set_grid_point((0, 0))
    assert piece.placed_before is True


def test_button_and_data_kept():
    data = PuzzlePieceData("q", (0, 0))
    marker = object()
    piece = PuzzlePiece(data, button=marker)
    assert piece.data is data
    assert piece.button is marker


def test_destroy():
    piece = make_piece()
    assert piece.destroyed is False
    piece.destroy()
    assert piece.destroyed is True