from __future__ import annotations

import random
from typing import Dict, List, Sequence, Set, Tuple

from esper import World

from clusterboard.components.tile import TileKind
from clusterboard.components.tile_marks import TileMarks
from clusterboard.constants import EMPTY_KIND
from clusterboard.events.bus import EventBus
from clusterboard.systems.board import BoardSystem
from clusterboard.systems.board_ops import get_board, get_entity_at, get_palette
from clusterboard.world import create_world

Position = Tuple[int, int]

RED = (179, 18, 42)
GREEN = (63, 127, 59)
BLUE = (70, 90, 180)
ABC_PALETTE = [('A', RED), ('B', GREEN), ('C', BLUE)]


def build_world_with_kinds(
    rows: Sequence[str],
    palette=ABC_PALETTE,
    *,
    seed: int = 7,
) -> Tuple[EventBus, World, BoardSystem]:
    """Board whose kinds are spelled out row by row; '.' marks an empty cell.

    Rows may be jagged like a real mask. Tiles are built through BoardSystem and
    then reassigned, so adjacency comes from the normal construction path.
    """
    bus = EventBus()
    world = create_world(palette=palette, rng=random.Random(seed))
    mask = [[0 if ch == '.' else 1 for ch in row] for row in rows]
    board_system = BoardSystem(world, bus, mask)
    set_kinds(world, rows)
    return bus, world, board_system


def set_kinds(world: World, rows: Sequence[str]) -> None:
    board = get_board(world)
    palette = get_palette(world)
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch == '.':
                continue
            tile = world.component_for_entity(get_entity_at(board, r, c), TileKind)
            tile.reassign(ch, palette.highlight_for(ch))


def kinds_grid(world: World) -> List[str]:
    board = get_board(world)
    lines = []
    for r in range(board.rows):
        line = ''
        for c in range(board.cols):
            kind = world.component_for_entity(get_entity_at(board, r, c), TileKind).kind
            line += '.' if kind == EMPTY_KIND else kind
        lines.append(line)
    return lines


def tile_snapshot(world: World) -> Dict[Position, Tuple[str, Tuple[int, int, int], bool, bool]]:
    board = get_board(world)
    snapshot = {}
    for (r, c), ent in board.cells.items():
        tile = world.component_for_entity(ent, TileKind)
        marks = world.component_for_entity(ent, TileMarks)
        snapshot[(r, c)] = (tile.kind, tile.highlight, marks.visited, marks.selected)
    return snapshot


def selected_positions(world: World) -> Set[Position]:
    board = get_board(world)
    return {
        pos for pos, ent in board.cells.items()
        if world.component_for_entity(ent, TileMarks).selected
    }


def brute_force_components(world: World) -> List[Tuple[str, Set[Position]]]:
    """Independent same-kind components using plain grid bounds, not adjacency flags."""
    board = get_board(world)
    kinds = {}
    for (r, c), ent in board.cells.items():
        kind = world.component_for_entity(ent, TileKind).kind
        if kind != EMPTY_KIND:
            kinds[(r, c)] = kind
    seen: Set[Position] = set()
    components: List[Tuple[str, Set[Position]]] = []
    for start in sorted(kinds):
        if start in seen:
            continue
        kind = kinds[start]
        stack = [start]
        component: Set[Position] = set()
        while stack:
            pos = stack.pop()
            if pos in component:
                continue
            component.add(pos)
            r, c = pos
            for nxt in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                if kinds.get(nxt) == kind and nxt not in component:
                    stack.append(nxt)
        seen |= component
        components.append((kind, component))
    return components
