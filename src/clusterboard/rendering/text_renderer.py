from typing import List, Sequence

from clusterboard.rendering.projection import RenderCell

RESET = "\033[0m"
BLACK_FOREGROUND = "\033[38;2;0;0;0m"


def _background(color) -> str:
    red, green, blue = color
    return f"\033[48;2;{red};{green};{blue}m"


def format_board(cells: Sequence[Sequence[RenderCell]], *, color: bool = False) -> str:
    """Plain-text board: one line per row, highlighted tiles wrapped in brackets.

    With ``color`` set, highlighted tiles also get their highlight as a 24-bit
    ANSI background behind black text.
    """
    lines: List[str] = []
    for row in cells:
        parts: List[str] = []
        for cell in row:
            if cell.emphasized:
                text = f"[{cell.glyph}]"
                if color:
                    text = _background(cell.attribute) + BLACK_FOREGROUND + text + RESET
                parts.append(text)
            else:
                parts.append(f" {cell.glyph} ")
        lines.append("".join(parts).rstrip())
    return "\n".join(lines)
