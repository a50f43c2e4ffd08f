"""Record color lookup table and its config-file loader.

File format, one mapping per line::

    # name, bgcolor[, fontcolor]
    QUERY,       skyblue
    TARGETENTRY, sienna, white
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class ColorMapError(Exception):
    """Raised when a color map file cannot be read."""


@dataclass(frozen=True)
class NodeColor:
    bgcolor: str
    fontcolor: str = ""


ColorMap = Mapping[str, NodeColor]

DEFAULT_NODE_COLORS: dict[str, NodeColor] = {
    "QUERY": NodeColor("skyblue"),
    "PLANNEDSTMT": NodeColor("pink"),
    "TARGETENTRY": NodeColor("sienna"),
}


def default_color_map() -> dict[str, NodeColor]:
    return dict(DEFAULT_NODE_COLORS)


def parse_color_map(lines: Iterable[str]) -> dict[str, NodeColor]:
    """Build a color map from config lines.

    Blank lines and ``#`` comments are skipped.  A line that does not split
    into two or three comma-separated values is logged and skipped; later
    lines override earlier ones for the same name.
    """
    colors: dict[str, NodeColor] = {}
    for lineno, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        parts = [p.strip() for p in line.split(",")]
        if len(parts) not in (2, 3):
            logger.warning("invalid node colors mapping at line %d", lineno)
            continue

        name, bgcolor = parts[0], parts[1]
        fontcolor = parts[2] if len(parts) == 3 else ""
        colors[name] = NodeColor(bgcolor, fontcolor)
    return colors


def load_color_map(path: Path) -> dict[str, NodeColor]:
    """Load a color map file. Raises ColorMapError if it cannot be read."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ColorMapError(f"could not open file \"{path}\" for reading: {e}") from e
    colors = parse_color_map(text.splitlines())
    logger.debug("loaded %d node color(s) from %s", len(colors), path)
    return colors
