from clusterboard.events.bus import (
    EventBus,
    EVENT_KEY_PRESS_RAW,
    EVENT_KIND_SELECTED,
)

# Printable ASCII without space; arcade key symbols match these code points.
FIRST_PRINTABLE = 33
LAST_PRINTABLE = 126


class InputSystem:
    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_KEY_PRESS_RAW, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        key = self.symbol_to_key(kwargs.get('symbol'))
        if key is None:
            return
        self.event_bus.emit(EVENT_KIND_SELECTED, key=key)

    @staticmethod
    def symbol_to_key(symbol) -> str | None:
        if isinstance(symbol, str):
            return symbol if len(symbol) == 1 and not symbol.isspace() else None
        try:
            code = int(symbol)
        except (TypeError, ValueError):
            return None
        if FIRST_PRINTABLE <= code <= LAST_PRINTABLE:
            return chr(code)
        return None
