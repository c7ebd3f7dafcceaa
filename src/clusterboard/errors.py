class ConfigurationError(ValueError):
    """Raised when a board layout or palette cannot produce a playable board."""


class BoardBoundsError(IndexError):
    """Raised when a tile outside the grid is addressed.

    Adjacency flags gate every neighbour lookup, so reaching this means the grid
    was built incorrectly.
    """
