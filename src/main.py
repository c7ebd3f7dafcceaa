"""Entry point for the Clusterboard tile puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import argparse
import logging
import random

from arcade import Window, run, set_background_color, color
from clusterboard.world import create_world
from clusterboard.constants import DEFAULT_LEVEL, WINDOW_WIDTH, WINDOW_HEIGHT
from clusterboard.config.levels import Level, bundled_levels, load_level
from clusterboard.console import ConsoleGame
from clusterboard.errors import ConfigurationError
from clusterboard.events.bus import EventBus, EVENT_KEY_PRESS_RAW
from clusterboard.systems.board import BoardSystem
from clusterboard.systems.region_finder import RegionFinderSystem
from clusterboard.systems.interaction import InteractionSystem
from clusterboard.systems.input import InputSystem
from clusterboard.systems.render import RenderSystem

logger = logging.getLogger("clusterboard")


class ClusterboardWindow(Window):
    def __init__(self, level: Level, rng: random.Random | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, f"Clusterboard - {level.name}")
        self.event_bus = EventBus()
        self.world = create_world(palette=level.palette, rng=rng)

        # Board and region systems
        self.board_system = BoardSystem(self.world, self.event_bus, level.mask)
        self.region_finder_system = RegionFinderSystem(self.world, self.event_bus)
        self.interaction_system = InteractionSystem(self.world, self.event_bus)

        # Interface systems
        self.input_system = InputSystem(self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        # The first frame needs a region map to highlight.
        self.region_finder_system.scan()
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS_RAW, symbol=symbol, modifiers=modifiers)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Clear the largest same-kind clusters on an irregular board")
    parser.add_argument("--level", default=DEFAULT_LEVEL,
                        help=f"Bundled level ({', '.join(bundled_levels())}) or path to a level JSON file")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for tile generation")
    parser.add_argument("--debug", action="store_true", help="Enable debug-level logging")
    parser.add_argument("--text", action="store_true", help="Play in the terminal instead of opening a window")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        level = load_level(args.level)
    except ConfigurationError as exc:
        logger.error("Cannot start: %s", exc)
        raise
    rng = random.Random(args.seed)
    if args.text:
        ConsoleGame(level, rng=rng).run()
        return
    ClusterboardWindow(level, rng=rng)
    run()


if __name__ == "__main__":
    main()
