"""The on-screen tray of buttons that spawn puzzle pieces."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Iterable, List, Optional

from jigsawgrid.data import PuzzlePieceData
from jigsawgrid.piece import PuzzlePiece

if TYPE_CHECKING:
    from jigsawgrid.controller import PlayerController

SPAWN_LOCATION = (0.0, 0.0, 100.0)


class PuzzleButton:
    """A tray button for one piece; hidden while its piece is in the world."""

    def __init__(self, data: PuzzlePieceData, hud: Optional["Hud"] = None) -> None:
        self.data = data
        self.hud = hud
        self.used = False
        self.visible = True

    @property
    def thumbnail(self):
        return self.data.thumbnail

    def click(self, controller: "PlayerController") -> PuzzlePiece:
        """Spawn this button's piece and hand it to ``controller`` to carry."""
        piece = PuzzlePiece(self.data, location=SPAWN_LOCATION, button=self)
        self.used = True
        if self.hud is not None:
            self.hud.refresh()
        controller.set_selected_piece(piece)
        return piece

    def __repr__(self) -> str:
        return f"PuzzleButton({self.data.name!r}, used={self.used})"


class Hud:
    """Holds one button per piece, in a shuffled order."""

    def __init__(
        self,
        pieces: Iterable[PuzzlePieceData] = (),
        rng: Optional[random.Random] = None,
    ) -> None:
        order = list(pieces)
        (rng if rng is not None else random).shuffle(order)
        self.buttons: List[PuzzleButton] = [PuzzleButton(data, self) for data in order]

    def refresh(self) -> None:
        """Show the buttons whose pieces are unused and hide the rest."""
        for button in self.buttons:
            button.visible = not button.used

    def visible_buttons(self) -> List[PuzzleButton]:
        """Return the buttons currently shown, in tray order."""
        return [button for button in self.buttons if button.visible]