from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple


@dataclass(frozen=True, slots=True)
class BoardMask:
    """Irregular occupancy layout: which cells of the grid hold a playable tile.

    Rows may be jagged. The grid is as wide as the longest row; positions past the
    end of a shorter row count as empty, the same as a 0 entry.
    """
    rows: Tuple[Tuple[bool, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[object]]) -> "BoardMask":
        return cls(rows=tuple(tuple(bool(value) for value in row) for row in rows))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def is_occupied(self, row: int, col: int) -> bool:
        if row < 0 or row >= len(self.rows):
            return False
        cells = self.rows[row]
        if col < 0 or col >= len(cells):
            return False
        return cells[col]

    def occupied_count(self) -> int:
        return sum(1 for row in self.rows for value in row if value)
