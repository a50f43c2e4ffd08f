"""Configuration loaded from environment variables."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _optional_path(name: str) -> Path | None:
    val = os.getenv(name)
    if not val:
        return None
    return Path(val)


# Graphviz
DOT_PROGRAM: str = os.getenv("DOT_PROGRAM", "dot")
PICTURE_FORMAT: str = os.getenv("PICTURE_FORMAT", "png")

# Colors
NODE_COLOR_MAP: Path | None = _optional_path("NODE_COLOR_MAP")

# Output locations (default: next to each input file)
DOT_DIR: Path | None = _optional_path("DOT_DIR")
IMG_DIR: Path | None = _optional_path("IMG_DIR")

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"
