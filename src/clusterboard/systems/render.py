from typing import Any, Dict, List, Tuple

from esper import World

from clusterboard.constants import GLYPH_COLOR
from clusterboard.events.bus import EventBus, EVENT_REGION_CLEARED
from clusterboard.rendering.projection import RenderCell, project_board
from clusterboard.systems.board_ops import board_dimensions, get_region_map
from clusterboard.ui.layout import compute_board_geometry

PADDING = 4

class RenderSystem:
    """Draws the board projection with arcade; never mutates the world."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_REGION_CLEARED, self.on_region_cleared)
        self.last_cleared: Tuple[str, int] | None = None
        # (row, col) -> (left, bottom, size) from the most recent process() call
        self._last_tile_layout: Dict[Tuple[int, int], Tuple[float, float, float]] = {}

    def on_region_cleared(self, sender, **kwargs):
        kind = kwargs.get('kind')
        positions = kwargs.get('positions') or []
        if kind is None:
            return
        self.last_cleared = (kind, len(positions))

    def highlighted_kinds(self) -> List[str]:
        return sorted(get_region_map(self.world).regions)

    def tile_layout(self) -> Dict[Tuple[int, int], Tuple[float, float, float]]:
        return dict(self._last_tile_layout)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        dims = board_dimensions(self.world)
        if not dims:
            return
        rows, cols = dims
        tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height, rows, cols)
        cells = project_board(self.world)
        self._last_tile_layout = {}
        draw_size = max(tile_size - PADDING, 4)
        for row, row_cells in enumerate(cells):
            # Row 0 sits at the top of the board; arcade's y axis points up.
            bottom = start_y + (rows - 1 - row) * tile_size + PADDING / 2
            for col, cell in enumerate(row_cells):
                left = start_x + col * tile_size + PADDING / 2
                self._last_tile_layout[(row, col)] = (left, bottom, draw_size)
                if headless:
                    continue
                self._draw_cell(arcade, cell, left, bottom, draw_size)
        if not headless:
            self._draw_status(arcade, start_x, start_y + rows * tile_size + 8)

    def status_text(self) -> str:
        kinds = self.highlighted_kinds()
        text = "Press: " + " ".join(kinds) if kinds else "No clusters left"
        if self.last_cleared is not None:
            kind, count = self.last_cleared
            text += f"   (cleared {count} x {kind})"
        return text

    def _draw_status(self, arcade: Any, x: float, y: float) -> None:
        arcade.draw_text(self.status_text(), x, y, GLYPH_COLOR, 14)

    @staticmethod
    def _draw_cell(arcade: Any, cell: RenderCell, left: float, bottom: float, size: float) -> None:
        if not cell.glyph.strip():
            return
        arcade.draw_lrbt_rectangle_filled(left, left + size, bottom, bottom + size, cell.attribute)
        if cell.emphasized:
            arcade.draw_lrbt_rectangle_outline(left, left + size, bottom, bottom + size, GLYPH_COLOR, 2)
        arcade.draw_text(
            cell.glyph,
            left + size / 2,
            bottom + size / 2,
            GLYPH_COLOR,
            max(int(size * 0.45), 8),
            anchor_x="center",
            anchor_y="center",
        )
