from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class BoardPosition:
    """Grid coordinates of a tile entity; fixed once the tile is placed."""
    row: int
    col: int
