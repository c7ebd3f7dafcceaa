import logging

from esper import World

from clusterboard.events.bus import (
    EventBus,
    EVENT_KIND_SELECTED,
    EVENT_INPUT_IGNORED,
    EVENT_REGION_CLEARED,
    EVENT_REFILL_COMPLETED,
    EVENT_BOARD_CHANGED,
)
from clusterboard.systems.board_ops import get_palette, get_region_map, refill_tiles, reset_tile_marks

logger = logging.getLogger(__name__)


class InteractionSystem:
    """Clears and refills the recorded region of the kind the player picks."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_KIND_SELECTED, self.on_kind_selected)

    def on_kind_selected(self, sender, **kwargs):
        key = kwargs.get('key')
        if key is None:
            return
        self.process(key)

    def process(self, key: str) -> bool:
        """Apply a kind selection. Returns False (and changes nothing) when the key has no region."""
        if not isinstance(key, str) or len(key) != 1:
            self._ignore(key, reason='not_a_single_character')
            return False
        palette = get_palette(self.world)
        kind = palette.normalize(key)
        region_map = get_region_map(self.world)
        positions = region_map.region_for(kind)
        if positions is None:
            self._ignore(key, reason='no_region')
            return False

        positions = list(positions)
        new_tiles = refill_tiles(self.world, positions)
        # Every recorded region is stale once kinds change.
        region_map.clear()
        reset_tile_marks(self.world)
        logger.debug("Cleared %d tile(s) of kind %r", len(positions), kind)

        self.event_bus.emit(EVENT_REGION_CLEARED, kind=kind, positions=positions)
        self.event_bus.emit(EVENT_REFILL_COMPLETED, new_tiles=new_tiles)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='interaction', positions=positions)
        return True

    def _ignore(self, key, *, reason: str) -> None:
        logger.debug("Ignoring key %r (%s)", key, reason)
        self.event_bus.emit(EVENT_INPUT_IGNORED, key=key, reason=reason)
