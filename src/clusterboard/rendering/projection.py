from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from esper import World

from clusterboard.constants import EMPTY_COLOR, EMPTY_GLYPH, NEUTRAL_COLOR
from clusterboard.systems.board_ops import get_board, iter_tiles

Color = Tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class RenderCell:
    glyph: str
    attribute: Color
    emphasized: bool = False


def project_board(world: World) -> List[List[RenderCell]]:
    """Read-only glyph/attribute grid, one cell per tile in row-major order.

    Empty tiles are blank whatever their marks say; selected tiles carry their
    highlight colour, everything else the neutral attribute.
    """
    board = get_board(world)
    cells: List[List[RenderCell]] = [[] for _ in range(board.rows)]
    for (row, _), tile, marks in iter_tiles(world, board):
        if tile.is_empty:
            cell = RenderCell(glyph=EMPTY_GLYPH, attribute=EMPTY_COLOR)
        elif marks.selected:
            cell = RenderCell(glyph=tile.kind, attribute=tile.highlight, emphasized=True)
        else:
            cell = RenderCell(glyph=tile.kind, attribute=NEUTRAL_COLOR)
        cells[row].append(cell)
    return cells
