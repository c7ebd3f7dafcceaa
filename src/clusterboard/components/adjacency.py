from dataclasses import dataclass
from typing import Iterator, Tuple

@dataclass(frozen=True, slots=True)
class Adjacency:
    """Which grid neighbours exist and are non-empty, fixed at board construction."""
    has_up: bool = False
    has_down: bool = False
    has_left: bool = False
    has_right: bool = False

    def offsets(self) -> Iterator[Tuple[int, int]]:
        """Yield (d_row, d_col) for each existing neighbour: left, right, up, down."""
        if self.has_left:
            yield (0, -1)
        if self.has_right:
            yield (0, 1)
        if self.has_up:
            yield (-1, 0)
        if self.has_down:
            yield (1, 0)
