#!/usr/bin/env python3
"""CLI: Read a PostgreSQL node tree on stdin and write DOT to stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure the package is importable when running as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from pgnode2graph import __version__, config
from pgnode2graph.parser.builder import MalformedTreeError
from pgnode2graph.pipeline import build_render_options, convert_text
from pgnode2graph.render.colors import ColorMapError


def main() -> None:
    parser = argparse.ArgumentParser(description="Convert postgresql node tree into dot language.")
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c", "--color",
        action="store_true",
        help="render the output with color",
    )
    parser.add_argument(
        "-n", "--node-color-map",
        type=Path,
        default=config.NODE_COLOR_MAP,
        help="color mapping file for nodes (with -c)",
    )
    parser.add_argument(
        "-s", "--skip-empty",
        action="store_true",
        help="skip empty fields",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )

    try:
        options = build_render_options(args.color, args.skip_empty, args.node_color_map)
    except ColorMapError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        dot_text = convert_text(sys.stdin.read(), options)
    except MalformedTreeError as e:
        print(f"parse node tree failed: {e}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(dot_text)


if __name__ == "__main__":
    main()
