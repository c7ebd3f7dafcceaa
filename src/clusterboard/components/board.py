from dataclasses import dataclass, field
from typing import Dict, Tuple

@dataclass(slots=True)
class Board:
    rows: int
    cols: int
    # (row, col) -> tile entity; dense, empty mask cells included.
    cells: Dict[Tuple[int, int], int] = field(default_factory=dict)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
