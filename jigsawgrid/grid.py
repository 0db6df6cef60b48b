"""The snapping grid that puzzle pieces are placed on."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

GridCoord = Tuple[int, int]
Vector = Tuple[float, float, float]


@dataclass
class GridCell:
    """One cell of the grid: its snap location and whatever sits on it."""

    location: Vector
    occupied: bool = False
    occupying: Optional[Any] = None


def _round_to_int(value: float) -> int:
    """Round half up, matching the engine's integer rounding."""
    return math.floor(value + 0.5)


class GridGenerator:
    """A rectangular grid of cells laid out from an origin."""

    def __init__(
        self,
        origin: Vector = (0.0, 0.0, 0.0),
        width: int = 5,
        height: int = 5,
        cell_size: float = 100.0,
    ) -> None:
        self.origin: Vector = tuple(float(c) for c in origin)  # type: ignore[assignment]
        self.width = width
        self.height = height
        self.cell_size = float(cell_size)
        self.cells: Dict[GridCoord, GridCell] = {}
        self.generate_grid()

    def generate_grid(self) -> None:
        """Create every cell, replacing any cell already at its coordinate."""
        ox, oy, oz = self.origin
        for x in range(self.width):
            for y in range(self.height):
                location = (ox + x * self.cell_size, oy + y * self.cell_size, oz)
                self.cells[(x, y)] = GridCell(location=location)

    def nearest_grid_coord(self, location: Vector) -> GridCoord:
        """Return the grid coordinate closest to ``location``; it may lie off the grid."""
        ox, oy, _ = self.origin
        return (
            _round_to_int((location[0] - ox) / self.cell_size),
            _round_to_int((location[1] - oy) / self.cell_size),
        )

    def cell_at(self, coord: GridCoord) -> Optional[GridCell]:
        """Return the cell at ``coord``, or None if the grid has no such cell."""
        return self.cells.get(tuple(coord))  # type: ignore[arg-type]