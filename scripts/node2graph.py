#!/usr/bin/env python3
"""CLI: Convert PostgreSQL node tree files into pictures with Graphviz."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure the package is importable when running as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from pgnode2graph import __version__, config
from pgnode2graph.graphviz import GraphvizError, check_dot_program
from pgnode2graph.pipeline import build_render_options, convert_file
from pgnode2graph.render.colors import ColorMapError


def main() -> None:
    parser = argparse.ArgumentParser(description="Convert PostgreSQL node tree into picture.")
    parser.add_argument("files", nargs="+", type=Path, metavar="FILE")
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
        "-D", "--dot-directory",
        type=Path,
        default=config.DOT_DIR,
        help="directory for the intermediate dot files (default: next to each input)",
    )
    parser.add_argument(
        "-I", "--img-directory",
        type=Path,
        default=config.IMG_DIR,
        help="directory for the output pictures (default: next to each input)",
    )
    parser.add_argument(
        "-n", "--node-color-map",
        type=Path,
        default=config.NODE_COLOR_MAP,
        help="color mapping file, one 'name, bgcolor[, fontcolor]' per line (with -c)",
    )
    parser.add_argument(
        "-r", "--remove-dots",
        action="store_true",
        help="remove the intermediate dot files",
    )
    parser.add_argument(
        "-s", "--skip-empty",
        action="store_true",
        help="skip empty fields",
    )
    parser.add_argument(
        "-T",
        dest="picture_format",
        default=config.PICTURE_FORMAT,
        metavar="FORMAT",
        help=f"format of the picture (default: {config.PICTURE_FORMAT})",
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
        check_dot_program()
    except GraphvizError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        sys.exit(1)

    for directory in (args.dot_directory, args.img_directory):
        if directory is not None:
            directory.mkdir(parents=True, exist_ok=True)

    failed = 0
    for source in args.files:
        print(f'processing "{source}" ... ', end="", flush=True)
        result = convert_file(
            source,
            options,
            picture_format=args.picture_format,
            dot_dir=args.dot_directory,
            img_dir=args.img_directory,
            remove_dot=args.remove_dots,
        )
        if result.ok:
            print("ok")
        else:
            failed += 1
            print("failed")

    if failed:
        print(f"{failed} of {len(args.files)} file(s) failed", file=sys.stderr)


if __name__ == "__main__":
    main()
