# jigsawgrid

jigsawgrid holds the game logic for a grid-based jigsaw puzzle. Pieces start in
a tray, and the player places them on a board of cells. A dropped piece snaps
to the nearest cell. When a piece already on the board is dropped onto another
occupied cell, the two pieces swap places. The game counts moves and reports a
win once every piece sits on its correct coordinate.

The package needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building blocks

### `jigsawgrid.data.PuzzlePieceData`

A frozen description of one piece.

- It has a `name`, a `correct_coord` and an optional `thumbnail`.
- Instances compare by identity.
- `is_correct_at(coord)` tells whether a coordinate is the piece's solved position.

### `jigsawgrid.grid.GridGenerator`

A board built from `origin`, `width`, `height` and `cell_size`. The defaults are a 5 × 5 board of 100-unit cells at the origin.

- `cells` maps `(x, y)` to a `GridCell`. Each `GridCell` has a `location`, an `occupied` flag and an `occupying` piece.
- `nearest_grid_coord(location)` rounds a world location to a coordinate. Halves round up. The result may lie off the board.
- `cell_at(coord)` returns the cell at that coordinate, or `None` if the coordinate is off the board.

### `jigsawgrid.piece.PuzzlePiece`

A piece in play. It holds:

- its `data`;
- its `location`;
- the `button` it was spawned from;
- its `grid_point`;
- a `placed_before` flag, which is set by `set_grid_point`;
- a `destroyed` flag, which is set by `destroy()`.

### `jigsawgrid.hud.Hud`

The tray. It holds one `PuzzleButton` per piece in `buttons`, shuffled with the given `random.Random`, or with the module-level generator if none is given.

- `refresh()` hides the buttons whose pieces are in use.
- `visible_buttons()` lists the buttons that are shown.
- `PuzzleButton.click(controller)` spawns the button's piece at `(0, 0, 100)`, marks the button as used, refreshes the tray and hands the piece to the controller.

### `jigsawgrid.game.GameMode`

Tracks which pieces are in their correct cells and counts moves.

- `begin_play()` registers every piece as not yet placed.
- `mark_piece(data, coord)` records whether a piece is at its correct coordinate. It raises `KeyError` for a piece that was never registered.
- `increase_move_count()` adds one to `move_count`.
- `check_win_condition()` returns `True` and calls `on_win` once every registered piece is correct.
- The `grid` attribute can hold the board for a controller that was given none.

### `jigsawgrid.controller.PlayerController`

Handles the player's input.

- `set_selected_piece(piece)` starts carrying a piece.
- `click_started(hit_piece)` picks up a piece from the board and frees its cell. If a piece is already being carried, the click drops it instead.
- `drag(location)` moves the carried piece over a location, lifted by `hover_offset`. The default offset is 20.
- `click_ended()` drops the carried piece on the nearest cell and returns that coordinate. It returns `None` if the piece left the board. The drop is resolved as follows:
  - On an empty cell, the piece is placed there.
  - On an occupied cell, with a piece fresh from the tray, the piece that was in the cell is sent back to the tray. Its button is shown again and the piece is destroyed.
  - On an occupied cell, with a piece that was already on the board, the two pieces swap cells.
  - Off the board, the dropped piece goes back to the tray.

  A drop counts as a move when the piece came from the tray or when it lands on a different cell. After every drop on the board, the win condition is checked.

If the controller was given no grid, it uses `game_mode.grid`. It raises `RuntimeError` if neither is set.

## Example

```python
import random

from jigsawgrid.controller import PlayerController
from jigsawgrid.data import PuzzlePieceData
from jigsawgrid.game import GameMode
from jigsawgrid.grid import GridGenerator
from jigsawgrid.hud import Hud

pieces = [PuzzlePieceData("corner", (0, 0)), PuzzlePieceData("edge", (1, 0))]

game = GameMode(pieces, on_win=lambda: print("Solved!"))
game.begin_play()

grid = GridGenerator((0.0, 0.0, 0.0), 2, 1, 100.0)
hud = Hud(pieces, random.Random(0))
controller = PlayerController(game, grid, hud, 20.0)

for button in hud.visible_buttons():
    button.click(controller)
    controller.drag((button.data.correct_coord[0] * 100.0, 0.0, 0.0))
    controller.click_ended()

print(game.move_count)  # 2
```

## What it does not do

jigsawgrid has no rendering, no window, no mouse handling and no command to run.

- Nothing draws the board, the pieces or the tray. Thumbnails are stored but never shown.
- Nothing works out which piece is under the cursor. The front end passes that piece to `click_started`, and passes world positions to `drag`.
- Winning only calls `on_win`. There is no end screen.