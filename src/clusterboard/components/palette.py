from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from clusterboard.constants import EMPTY_KIND
from clusterboard.errors import ConfigurationError

Color = Tuple[int, int, int]


def parse_color(value: object) -> Color:
    """Accept ``#RRGGBB`` strings or three 0-255 integers."""
    if isinstance(value, str):
        text = value.lstrip("#")
        if len(text) != 6:
            raise ConfigurationError(f"Colour {value!r} must look like #RRGGBB")
        try:
            return int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16)
        except ValueError as exc:
            raise ConfigurationError(f"Colour {value!r} must look like #RRGGBB") from exc
    if isinstance(value, Sequence) and len(value) == 3:
        channels = []
        for channel in value:
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ConfigurationError(f"Colour {value!r} must hold three integers in 0-255")
            channels.append(channel)
        return channels[0], channels[1], channels[2]
    raise ConfigurationError(f"Unsupported colour value {value!r}")


@dataclass(frozen=True, slots=True)
class PaletteEntry:
    kind: str
    highlight: Color


@dataclass(slots=True)
class Palette:
    """Canonical tile kinds stored on a single entity.

    This component lives alongside PaletteRegistry (tag). Kinds are single
    characters kept in upper case; input keys are folded to that case before
    lookup. The reserved empty kind can never be part of a palette.
    """
    entries: List[PaletteEntry]
    _by_kind: Dict[str, PaletteEntry] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.entries:
            raise ConfigurationError("Palette must contain at least one tile kind")
        normalized: List[PaletteEntry] = []
        seen: Dict[str, PaletteEntry] = {}
        for entry in self.entries:
            kind = entry.kind
            if not isinstance(kind, str):
                raise ConfigurationError(f"Tile kind {kind!r} must be a single visible character")
            # Upper-casing can expand a character (sharp s becomes 'SS'), so check afterwards.
            kind = self.normalize(kind)
            if len(kind) != 1 or kind.isspace():
                raise ConfigurationError(f"Tile kind {entry.kind!r} must be a single visible character")
            if kind == EMPTY_KIND:
                raise ConfigurationError(f"Tile kind {EMPTY_KIND!r} is reserved for empty cells")
            if kind in seen:
                raise ConfigurationError(f"Duplicate tile kind {kind!r} in palette")
            canonical = PaletteEntry(kind=kind, highlight=parse_color(entry.highlight))
            seen[kind] = canonical
            normalized.append(canonical)
        self.entries = normalized
        self._by_kind = seen

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[object]]) -> "Palette":
        return cls(entries=[PaletteEntry(kind=kind, highlight=color) for kind, color in pairs])

    @staticmethod
    def normalize(key: str) -> str:
        return key.upper()

    def kinds(self) -> List[str]:
        return [entry.kind for entry in self.entries]

    def highlight_for(self, kind: str) -> Color:
        return self._by_kind[kind].highlight

    def draw(self, rng: random.Random) -> PaletteEntry:
        """Pick one entry uniformly at random."""
        return rng.choice(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
