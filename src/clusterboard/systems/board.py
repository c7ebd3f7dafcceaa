import logging
from typing import Sequence

from esper import World

from clusterboard.components.adjacency import Adjacency
from clusterboard.components.board import Board
from clusterboard.components.board_mask import BoardMask
from clusterboard.components.board_position import BoardPosition
from clusterboard.components.tile import TileKind
from clusterboard.components.tile_marks import TileMarks
from clusterboard.constants import EMPTY_COLOR, EMPTY_KIND
from clusterboard.errors import ConfigurationError
from clusterboard.events.bus import EVENT_BOARD_READY, EventBus
from clusterboard.systems.board_ops import get_palette, world_random

logger = logging.getLogger(__name__)


class BoardSystem:
    def __init__(self, world: World, event_bus: EventBus, mask: BoardMask | Sequence[Sequence[int]]):
        self.world = world
        self.event_bus = event_bus
        if not isinstance(mask, BoardMask):
            mask = BoardMask.from_rows(mask)
        if mask.height == 0 or mask.width == 0:
            raise ConfigurationError(f"Board layout must have at least one row and column, got {mask.height}x{mask.width}")
        self.mask = mask
        # Create a single board entity with Board component
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, Board(rows=mask.height, cols=mask.width))
        self._init_board()
        self.event_bus.emit(EVENT_BOARD_READY, rows=mask.height, cols=mask.width)

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def _init_board(self):
        board = self.board
        palette = get_palette(self.world)
        rng = world_random(self.world)
        for r in range(board.rows):
            for c in range(board.cols):
                if self.mask.is_occupied(r, c):
                    entry = palette.draw(rng)
                    tile = TileKind(kind=entry.kind, highlight=entry.highlight)
                else:
                    tile = TileKind(kind=EMPTY_KIND, highlight=EMPTY_COLOR)
                ent = self.world.create_entity(BoardPosition(row=r, col=c), tile, TileMarks())
                board.cells[(r, c)] = ent
        # Flags read neighbour kinds, so they need every tile in place first.
        for r in range(board.rows):
            for c in range(board.cols):
                adjacency = Adjacency(
                    has_up=self._neighbor_exists(r - 1, c),
                    has_down=self._neighbor_exists(r + 1, c),
                    has_left=self._neighbor_exists(r, c - 1),
                    has_right=self._neighbor_exists(r, c + 1),
                )
                self.world.add_component(board.cells[(r, c)], adjacency)
        logger.debug(
            "Built %dx%d board with %d playable tiles",
            board.rows, board.cols, self.mask.occupied_count(),
        )

    def _neighbor_exists(self, row: int, col: int) -> bool:
        board = self.board
        if not board.in_bounds(row, col):
            return False
        tile: TileKind = self.world.component_for_entity(board.cells[(row, col)], TileKind)
        return not tile.is_empty
