from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_KEY_PRESS_RAW = "key_press_raw"      # payload: symbol=int, modifiers=int
EVENT_KIND_SELECTED = "kind_selected"      # payload: key=str
EVENT_INPUT_IGNORED = "input_ignored"      # payload: key=str, reason=str


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_BOARD_READY = "board_ready"                  # payload: rows=int, cols=int
EVENT_REGIONS_SCANNED = "regions_scanned"          # payload: regions=dict[str, list[(r,c)]]
EVENT_REGION_CLEARED = "region_cleared"            # payload: kind=str, positions=[(r,c),...]
EVENT_REFILL_COMPLETED = "refill_completed"        # payload: new_tiles=[(r,c,kind),...]
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, positions=list[(r,c)]
