from clusterboard.constants import TILE_SIZE, BOTTOM_MARGIN, BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT

def compute_board_geometry(window_width: int, window_height: int, rows: int, cols: int):
    """Return (tile_size, start_x, start_y) for a rows x cols board centred in the window.

    Tile size shrinks so the board stays inside the configured share of the window,
    and never grows past TILE_SIZE.
    """
    if rows <= 0 or cols <= 0:
        return TILE_SIZE, window_width / 2, BOTTOM_MARGIN
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h, TILE_SIZE))
    if tile_size < 12:
        tile_size = 12
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y
