"""Game state: move counting and the win condition."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from jigsawgrid.data import PuzzlePieceData
from jigsawgrid.grid import GridGenerator

GridCoord = Tuple[int, int]

logger = logging.getLogger(__name__)


class GameMode:
    """Tracks which pieces sit in their solved cells and how many moves were made."""

    def __init__(
        self,
        pieces: Iterable[PuzzlePieceData] = (),
        on_win: Optional[Callable[[], None]] = None,
    ) -> None:
        self.pieces: List[PuzzlePieceData] = list(pieces)
        self.on_win = on_win
        self.move_count = 0
        self.piece_control: Dict[PuzzlePieceData, bool] = {}
        self.grid: Optional[GridGenerator] = None

    def begin_play(self) -> None:
        """Register every piece as not yet in its correct cell."""
        for data in self.pieces:
            self.piece_control[data] = False

    def check_win_condition(self) -> bool:
        """Return True and fire ``on_win`` if every piece is in its correct cell."""
        if not all(self.piece_control.values()):
            return False
        logger.info("Puzzle solved in %d moves", self.move_count)
        if self.on_win is not None:
            self.on_win()
        return True

    def increase_move_count(self) -> None:
        self.move_count += 1

    def mark_piece(self, data: PuzzlePieceData, coord: GridCoord) -> None:
        """Record whether ``data`` now sits at its correct coordinate.

        Raises KeyError for a piece that was never registered.
        """
        if data not in self.piece_control:
            raise KeyError(data.name)
        self.piece_control[data] = data.is_correct_at(coord)