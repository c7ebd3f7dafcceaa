import random
from typing import Iterable, Sequence

from esper import World

from clusterboard.components.palette import Palette
from clusterboard.components.palette_registry import PaletteRegistry
from clusterboard.components.region_map import RegionMap


DEFAULT_PALETTE = [
    ('R', (179, 18, 42)),     # #B3122A
    ('G', (63, 127, 59)),     # #3F7F3B
    ('B', (70, 90, 180)),     # #465AB4
    ('Y', (216, 155, 38)),    # #D89B26
    ('M', (123, 62, 133)),    # #7B3E85
    ('C', (70, 170, 170)),    # #46AAAA
]


def create_world(
    *,
    palette: Palette | Iterable[Sequence[object]] | None = None,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding the palette and an empty region map.

    Raises ConfigurationError for an unusable palette.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    if palette is None:
        palette = Palette.from_pairs(DEFAULT_PALETTE)
    elif not isinstance(palette, Palette):
        palette = Palette.from_pairs(palette)

    # Single registry entity with the canonical kinds
    world.create_entity(PaletteRegistry(), palette)
    world.create_entity(RegionMap())
    return world
