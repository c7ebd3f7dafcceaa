from __future__ import annotations

import random
from typing import Iterator, List, Tuple

from esper import World

from clusterboard.components.adjacency import Adjacency
from clusterboard.components.board import Board
from clusterboard.components.palette import Palette
from clusterboard.components.palette_registry import PaletteRegistry
from clusterboard.components.region_map import RegionMap
from clusterboard.components.tile import TileKind
from clusterboard.components.tile_marks import TileMarks
from clusterboard.errors import BoardBoundsError

Position = Tuple[int, int]


def get_palette(world: World) -> Palette:
    for entity, _ in world.get_component(PaletteRegistry):
        return world.component_for_entity(entity, Palette)
    raise RuntimeError("Palette definitions not found")


def get_region_map(world: World) -> RegionMap:
    for _, region_map in world.get_component(RegionMap):
        return region_map
    raise RuntimeError("RegionMap not found")


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def board_dimensions(world: World) -> Tuple[int, int] | None:
    for _, board in world.get_component(Board):
        return board.rows, board.cols
    return None


def world_random(world: World) -> random.Random:
    candidate = getattr(world, "random", None)
    if isinstance(candidate, random.Random):
        return candidate
    rng = random.Random()
    setattr(world, "random", rng)
    return rng


def get_entity_at(board: Board, row: int, col: int) -> int:
    """Entity of the tile at (row, col); every in-range cell has one."""
    if not board.in_bounds(row, col):
        raise BoardBoundsError(f"Tile ({row}, {col}) outside {board.rows}x{board.cols} board")
    return board.cells[(row, col)]


def iter_tiles(world: World, board: Board) -> Iterator[Tuple[Position, TileKind, TileMarks]]:
    """Yield every tile in row-major order."""
    for row in range(board.rows):
        for col in range(board.cols):
            entity = board.cells[(row, col)]
            tile = world.component_for_entity(entity, TileKind)
            marks = world.component_for_entity(entity, TileMarks)
            yield (row, col), tile, marks


def neighbor_positions(world: World, board: Board, row: int, col: int) -> List[Position]:
    """Positions of the existing (non-empty) grid neighbours of a tile."""
    entity = get_entity_at(board, row, col)
    adjacency = world.component_for_entity(entity, Adjacency)
    return [(row + d_row, col + d_col) for d_row, d_col in adjacency.offsets()]


def refill_tiles(world: World, positions: List[Position]) -> List[Tuple[int, int, str]]:
    """Give each position a freshly drawn kind and clear its marks."""
    board = get_board(world)
    palette = get_palette(world)
    rng = world_random(world)
    spawned: List[Tuple[int, int, str]] = []
    for row, col in positions:
        entity = get_entity_at(board, row, col)
        tile: TileKind = world.component_for_entity(entity, TileKind)
        marks: TileMarks = world.component_for_entity(entity, TileMarks)
        entry = palette.draw(rng)
        tile.reassign(entry.kind, entry.highlight)
        marks.reset()
        spawned.append((row, col, entry.kind))
    return spawned


def reset_tile_marks(world: World) -> int:
    """Clear visited/selected on every non-empty tile; empty tiles are left alone."""
    cleared = 0
    for _, (tile, marks) in world.get_components(TileKind, TileMarks):
        if tile.is_empty:
            continue
        marks.reset()
        cleared += 1
    return cleared
