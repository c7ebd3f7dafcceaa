from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Tuple

from esper import World

from clusterboard.components.board import Board
from clusterboard.components.tile import TileKind
from clusterboard.components.tile_marks import TileMarks
from clusterboard.constants import MIN_REGION_SIZE
from clusterboard.events.bus import EVENT_BOARD_CHANGED, EVENT_REGIONS_SCANNED, EventBus
from clusterboard.systems.board_ops import (
    get_board,
    get_entity_at,
    get_region_map,
    neighbor_positions,
    reset_tile_marks,
)

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


def collect_region(world: World, board: Board, seed: Position) -> Tuple[str, List[Position]]:
    """Breadth-first walk of the same-kind component containing ``seed``.

    A tile can be queued more than once before it is reached; the visited mark
    checked on dequeue is what keeps it from being counted twice. Returns the
    component kind and its positions in visiting order.
    """
    region: List[Position] = []
    kind: str | None = None
    queue: Deque[Position] = deque([seed])
    while queue:
        row, col = queue.popleft()
        entity = get_entity_at(board, row, col)
        marks: TileMarks = world.component_for_entity(entity, TileMarks)
        if marks.visited:
            continue
        tile: TileKind = world.component_for_entity(entity, TileKind)
        if kind is None:
            kind = tile.kind
        marks.visited = True
        region.append((row, col))
        for n_row, n_col in neighbor_positions(world, board, row, col):
            neighbor = get_entity_at(board, n_row, n_col)
            n_tile: TileKind = world.component_for_entity(neighbor, TileKind)
            n_marks: TileMarks = world.component_for_entity(neighbor, TileMarks)
            if n_tile.kind == kind and not n_marks.visited:
                queue.append((n_row, n_col))
    return kind or "", region


def find_regions(world: World, *, min_size: int = MIN_REGION_SIZE) -> Dict[str, List[Position]]:
    """Largest connected region per kind, keeping only regions of at least ``min_size``.

    Seeds are taken in row-major order and a later region only replaces an
    earlier one of the same kind when strictly larger. Tiles of kept regions are
    marked selected. Visited marks must be clear on entry and are left set.
    """
    board = get_board(world)
    regions: Dict[str, List[Position]] = {}
    for row in range(board.rows):
        for col in range(board.cols):
            entity = board.cells[(row, col)]
            tile: TileKind = world.component_for_entity(entity, TileKind)
            if tile.is_empty:
                continue
            marks: TileMarks = world.component_for_entity(entity, TileMarks)
            if marks.visited:
                continue
            kind, region = collect_region(world, board, (row, col))
            if len(region) < min_size:
                continue
            current = regions.get(kind)
            if current is None or len(region) > len(current):
                regions[kind] = region

    for positions in regions.values():
        for row, col in positions:
            marks = world.component_for_entity(get_entity_at(board, row, col), TileMarks)
            marks.selected = True
    return regions


class RegionFinderSystem:
    """Keeps the RegionMap in step with the board.

    Scans on demand and again whenever the board reports a change.
    """

    def __init__(self, world: World, event_bus: EventBus, *, min_size: int = MIN_REGION_SIZE):
        self.world = world
        self.event_bus = event_bus
        self.min_size = min_size
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)

    def on_board_changed(self, sender, **kwargs):
        self.scan()

    def scan(self) -> Dict[str, List[Position]]:
        # Marks from an earlier scan would hide every seed.
        reset_tile_marks(self.world)
        regions = find_regions(self.world, min_size=self.min_size)
        region_map = get_region_map(self.world)
        region_map.replace(regions)
        logger.debug(
            "Scan kept %d region(s): %s",
            len(regions),
            {kind: len(positions) for kind, positions in regions.items()},
        )
        self.event_bus.emit(EVENT_REGIONS_SCANNED, regions={k: list(v) for k, v in regions.items()})
        return regions
