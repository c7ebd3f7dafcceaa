from dataclasses import dataclass

@dataclass(slots=True)
class PaletteRegistry:
    """Empty tag component marking the single entity that stores the palette.

    The same entity also has a Palette component with the kind -> colour entries.
    """
    pass
