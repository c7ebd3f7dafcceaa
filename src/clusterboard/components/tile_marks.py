from dataclasses import dataclass

@dataclass(slots=True)
class TileMarks:
    """Transient per-tile flags.

    visited: set while a region scan walks the board.
    selected: tile belongs to the largest recorded region of its kind; stays set
    until the next clear/refill cycle.
    """
    visited: bool = False
    selected: bool = False

    def reset(self) -> None:
        self.visited = False
        self.selected = False
