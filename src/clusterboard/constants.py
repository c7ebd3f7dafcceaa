TILE_SIZE = 48
BOTTOM_MARGIN = 20
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.90

# Reserved kind for cells the mask leaves out; never allowed in a palette.
EMPTY_KIND = "0"
EMPTY_GLYPH = " "
EMPTY_COLOR = (0, 0, 0)
# Attribute for tiles that are not part of a highlighted region.
NEUTRAL_COLOR = (90, 90, 90)
GLYPH_COLOR = (255, 255, 255)

# Smallest region that gets recorded and highlighted.
MIN_REGION_SIZE = 3

DEFAULT_LEVEL = "diamond"
