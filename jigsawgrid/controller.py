"""Player input: picking up, dragging and dropping pieces on the grid."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from jigsawgrid.game import GameMode
from jigsawgrid.grid import GridGenerator
from jigsawgrid.hud import Hud
from jigsawgrid.piece import PuzzlePiece

GridCoord = Tuple[int, int]
Vector = Tuple[float, float, float]

logger = logging.getLogger(__name__)


class PlayerController:
    """Moves a selected piece around and resolves where it lands."""

    def __init__(
        self,
        game_mode: GameMode,
        grid: Optional[GridGenerator] = None,
        hud: Optional[Hud] = None,
        hover_offset: float = 20.0,
    ) -> None:
        self.game_mode = game_mode
        self._grid = grid
        self.hud = hud
        self.hover_offset = float(hover_offset)
        self.selected_piece: Optional[PuzzlePiece] = None
        self.original_z = 0.0

    @property
    def grid(self) -> GridGenerator:
        """The grid in use, taken from the game mode if none was given."""
        if self._grid is None:
            self._grid = self.game_mode.grid
        if self._grid is None:
            raise RuntimeError("no grid is available")
        return self._grid

    def set_selected_piece(self, piece: PuzzlePiece) -> None:
        """Start carrying ``piece``, remembering its resting height."""
        self.original_z = piece.location[2]
        self.selected_piece = piece

    def click_started(self, hit_piece: Optional[PuzzlePiece]) -> None:
        """Handle a press; ``hit_piece`` is the piece under the cursor, if any.

        If a piece is already being carried, the press drops it instead.
        """
        if self.selected_piece is not None:
            self.click_ended()
            return
        if hit_piece is None:
            return
        self.original_z = hit_piece.location[2]
        self.selected_piece = hit_piece
        cell = self.grid.cell_at(hit_piece.grid_point)
        if cell is not None:
            cell.occupying = None
        logger.debug("picked up %r", hit_piece)

    def drag(self, location: Vector) -> None:
        """Move the carried piece over ``location``, lifted by the hover offset."""
        if self.selected_piece is None:
            return
        self.selected_piece.location = (
            float(location[0]),
            float(location[1]),
            self.original_z + self.hover_offset,
        )

    def _return_to_tray(self, piece: PuzzlePiece) -> None:
        if piece.button is not None:
            piece.button.used = False
        if self.hud is not None:
            self.hud.refresh()
        piece.destroy()

    def click_ended(self) -> Optional[GridCoord]:
        """Drop the carried piece on the nearest cell.

        An empty cell takes the piece. A filled cell swaps with a piece that
        came from the grid, or loses its piece to one fresh from the tray.
        Dropped off the grid, the piece goes back to the tray. Returns the
        cell the piece landed in, or None.
        """
        selected = self.selected_piece
        if selected is None:
            return None

        grid = self.grid
        previous = selected.grid_point
        nearest = grid.nearest_grid_coord(selected.location)
        logger.debug("nearest grid point: %s", nearest)

        cell = grid.cell_at(nearest)
        if cell is None:
            self._return_to_tray(selected)
            self.selected_piece = None
            return None

        old = cell.occupying
        if old is not None:
            if not selected.placed_before:
                self._return_to_tray(old)
            else:
                vacated = grid.cell_at(selected.grid_point)
                if vacated is not None:
                    old.location = vacated.location
                    old.set_grid_point(selected.grid_point)
                    vacated.occupying = old
                    self.game_mode.mark_piece(old.data, selected.grid_point)

        selected.location = (cell.location[0], cell.location[1], self.original_z)
        selected.set_grid_point(nearest)
        cell.occupying = selected

        if not selected.placed_before or previous != nearest:
            self.game_mode.increase_move_count()

        self.game_mode.mark_piece(selected.data, nearest)
        self.game_mode.check_win_condition()
        self.selected_piece = None
        return nearest