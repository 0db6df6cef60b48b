"""Static description of a puzzle piece."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

GridCoord = Tuple[int, int]


@dataclass(frozen=True, eq=False)
class PuzzlePieceData:
    """What a piece is and where it belongs on the board.

    Instances compare and hash by identity, so two pieces that happen to
    share a name and target cell stay separate keys in the win-condition map.
    """

    name: str
    correct_coord: GridCoord
    thumbnail: Optional[Any] = None

    def is_correct_at(self, coord: GridCoord) -> bool:
        """Return True if ``coord`` is this piece's solved position."""
        return tuple(coord) == tuple(self.correct_coord)