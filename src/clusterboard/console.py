import logging
import random
import sys
from typing import TextIO

from clusterboard.config.levels import Level
from clusterboard.events.bus import EventBus, EVENT_KEY_PRESS_RAW, EVENT_REGION_CLEARED
from clusterboard.rendering.projection import project_board
from clusterboard.rendering.text_renderer import format_board
from clusterboard.systems.board import BoardSystem
from clusterboard.systems.board_ops import get_region_map
from clusterboard.systems.input import InputSystem
from clusterboard.systems.interaction import InteractionSystem
from clusterboard.systems.region_finder import RegionFinderSystem
from clusterboard.world import create_world

logger = logging.getLogger(__name__)

QUIT_WORD = "quit"


class ConsoleGame:
    """Terminal front end: prints the text board and feeds typed lines in as key presses."""

    def __init__(self, level: Level, rng: random.Random | None = None,
                 stdin: TextIO | None = None, stdout: TextIO | None = None,
                 color: bool | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.color = self.stdout.isatty() if color is None else color
        self.event_bus = EventBus()
        self.world = create_world(palette=level.palette, rng=rng)
        self.board_system = BoardSystem(self.world, self.event_bus, level.mask)
        self.region_finder_system = RegionFinderSystem(self.world, self.event_bus)
        self.interaction_system = InteractionSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.event_bus)
        self.cleared = 0
        self.event_bus.subscribe(EVENT_REGION_CLEARED, self._on_region_cleared)
        self.region_finder_system.scan()

    def _on_region_cleared(self, sender, **kwargs):
        self.cleared += 1

    def prompt(self) -> str:
        kinds = sorted(get_region_map(self.world).regions)
        if not kinds:
            return "No clusters left > "
        return "Press " + "/".join(kinds) + " > "

    def render(self) -> None:
        self.stdout.write(format_board(project_board(self.world), color=self.color) + "\n\n")
        self.stdout.write(self.prompt())
        self.stdout.flush()

    def feed(self, line: str) -> None:
        for char in line:
            self.event_bus.emit(EVENT_KEY_PRESS_RAW, symbol=char, modifiers=0)

    def run(self) -> int:
        while True:
            self.render()
            line = self.stdin.readline()
            if not line:
                self.stdout.write("\n")
                break
            line = line.strip()
            if not line or line.lower() == QUIT_WORD:
                break
            self.feed(line)
        logger.info("Session ended after %d cleared regions", self.cleared)
        return self.cleared
