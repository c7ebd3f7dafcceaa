from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List

from clusterboard.components.board_mask import BoardMask
from clusterboard.components.palette import Palette, PaletteEntry
from clusterboard.errors import ConfigurationError

logger = logging.getLogger(__name__)

LEVEL_DIR = Path(__file__).resolve().parent / "data"


@dataclass(frozen=True, slots=True)
class Level:
    name: str
    mask: BoardMask
    palette: Palette


def bundled_levels() -> List[str]:
    return sorted(path.stem for path in LEVEL_DIR.glob("*.json"))


def resolve_level_path(name_or_path: str | Path) -> Path:
    """Bundled level names map to the packaged data folder; anything else is a path."""
    candidate = LEVEL_DIR / f"{name_or_path}.json"
    if isinstance(name_or_path, str) and candidate.exists():
        return candidate
    return Path(name_or_path)


def load_level(name_or_path: str | Path) -> Level:
    path = resolve_level_path(name_or_path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Level file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Level file {path} is not valid JSON: {exc}") from exc
    level = parse_level(payload, default_name=path.stem)
    logger.debug(
        "Loaded level %r from %s (%dx%d, %d kinds)",
        level.name, path, level.mask.height, level.mask.width, len(level.palette),
    )
    return level


def parse_level(payload: Any, *, default_name: str = "level") -> Level:
    if not isinstance(payload, dict):
        raise ConfigurationError("Level data must be a JSON object")
    name = payload.get("name") or default_name
    mask = parse_layout(payload.get("layout"))
    palette = parse_palette(payload.get("palette"))
    return Level(name=str(name), mask=mask, palette=palette)


def parse_layout(rows: Any) -> BoardMask:
    """Validate a jagged 0/1 layout. An empty or zero-width layout cannot be played."""
    if not isinstance(rows, list) or not rows:
        raise ConfigurationError("Board layout must be a non-empty list of rows")
    for index, row in enumerate(rows):
        if not isinstance(row, list):
            raise ConfigurationError(f"Board layout row {index} must be a list")
        for value in row:
            if isinstance(value, bool) or value in (0, 1):
                continue
            raise ConfigurationError(f"Board layout row {index} holds {value!r}; expected 0 or 1")
    mask = BoardMask.from_rows(rows)
    if mask.width == 0:
        raise ConfigurationError("Board layout has no columns")
    return mask


def parse_palette(entries: Any) -> Palette:
    if not isinstance(entries, list) or not entries:
        raise ConfigurationError("Palette must be a non-empty list")
    parsed: List[PaletteEntry] = []
    for entry in entries:
        if isinstance(entry, dict):
            kind = entry.get("kind")
            color = entry.get("color")
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            kind, color = entry
        else:
            raise ConfigurationError(f"Palette entry {entry!r} must be an object or [kind, color] pair")
        if not isinstance(kind, str):
            raise ConfigurationError(f"Palette kind {kind!r} must be a string")
        parsed.append(PaletteEntry(kind=kind, highlight=color))
    return Palette(entries=parsed)

