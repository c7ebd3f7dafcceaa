from dataclasses import dataclass
from typing import Tuple

from clusterboard.constants import EMPTY_KIND

Color = Tuple[int, int, int]

@dataclass(slots=True)
class TileKind:
    """Per-tile kind assignment plus the colour used when the tile is highlighted.

    Adjacency lives in its own frozen component, so reassigning a kind never
    touches neighbour flags.
    """
    kind: str
    highlight: Color

    @property
    def is_empty(self) -> bool:
        return self.kind == EMPTY_KIND

    def reassign(self, kind: str, highlight: Color) -> None:
        self.kind = kind
        self.highlight = highlight
