"""A puzzle piece that lives in the world."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from jigsawgrid.data import PuzzlePieceData

GridCoord = Tuple[int, int]
Vector = Tuple[float, float, float]


class PuzzlePiece:
    """A spawned piece: its data, world location and grid position."""

    def __init__(
        self,
        data: PuzzlePieceData,
        location: Vector = (0.0, 0.0, 100.0),
        button: Optional[Any] = None,
    ) -> None:
        self.data = data
        self.location: Vector = tuple(location)  # type: ignore[assignment]
        self.button = button
        self.grid_point: GridCoord = (0, 0)
        self.placed_before = False
        self.destroyed = False

    def set_grid_point(self, coord: GridCoord) -> None:
        """Record the cell the piece sits in; it now counts as placed."""
        self.grid_point = tuple(coord)  # type: ignore[assignment]
        self.placed_before = True

    def destroy(self) -> None:
        """Mark the piece as removed from the world."""
        self.destroyed = True

    def __repr__(self) -> str:
        return f"PuzzlePiece({self.data.name!r}, grid_point={self.grid_point})"