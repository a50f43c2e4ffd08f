"""Per-document conversion steps: node tree file -> DOT file -> picture.

Each document is converted on its own.  A failure is logged and returned in
the ConversionResult so the caller can move on to the next file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pgnode2graph.graphviz import GraphvizError, render_image
from pgnode2graph.parser.builder import MalformedTreeError, parse_node_tree
from pgnode2graph.render.colors import default_color_map, load_color_map
from pgnode2graph.render.dot import RenderOptions, write_dot

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    source: Path
    dot_file: Path
    image_file: Path | None
    ok: bool
    error: str | None = None


def build_render_options(
    enable_color: bool = False,
    skip_empty: bool = False,
    color_map: Path | None = None,
) -> RenderOptions:
    """Resolve output switches, loading the color table only if color is on.

    Without a color map file the built-in table is used.  Raises
    ColorMapError if the file cannot be read.
    """
    if not enable_color:
        return RenderOptions(skip_empty=skip_empty)
    colors = load_color_map(color_map) if color_map is not None else default_color_map()
    return RenderOptions(enable_color=True, skip_empty=skip_empty, colors=colors)


def get_dot_filename(source: Path, dot_dir: Path | None = None) -> Path:
    """``<source>.dot``, or ``<dot_dir>/<basename>.dot`` when dot_dir is set."""
    if dot_dir is not None:
        return dot_dir / f"{source.name}.dot"
    return source.with_name(f"{source.name}.dot")


def get_img_filename(source: Path, fmt: str, img_dir: Path | None = None) -> Path:
    """``<source>.<fmt>``, or ``<img_dir>/<basename>.<fmt>`` when img_dir is set."""
    if img_dir is not None:
        return img_dir / f"{source.name}.{fmt}"
    return source.with_name(f"{source.name}.{fmt}")


def convert_text(text: str, options: RenderOptions | None = None) -> str:
    """Parse one node tree dump and return its DOT document.

    Raises MalformedTreeError if the dump is not a balanced node tree.
    """
    return write_dot(parse_node_tree(text), options)


def convert_file(
    source: Path,
    options: RenderOptions | None = None,
    *,
    picture_format: str = "png",
    dot_dir: Path | None = None,
    img_dir: Path | None = None,
    remove_dot: bool = False,
    render: bool = True,
    dot_program: str | None = None,
) -> ConversionResult:
    """Convert one node tree file into a DOT file and, if ``render``, a picture.

    The DOT file is written only once the tree has parsed, so a malformed
    input never leaves a partial DOT file behind.
    """
    dot_file = get_dot_filename(source, dot_dir)
    image_file = get_img_filename(source, picture_format, img_dir) if render else None
    result = ConversionResult(source=source, dot_file=dot_file, image_file=image_file, ok=False)

    try:
        text = source.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        result.error = f"could not open file \"{source}\" for reading: {e}"
        logger.error("%s", result.error)
        return result

    try:
        dot_text = convert_text(text, options)
    except MalformedTreeError as e:
        result.error = f"could not parse node tree from file \"{source}\": {e}"
        logger.error("%s", result.error)
        return result

    try:
        dot_file.write_text(dot_text, encoding="utf-8")
    except OSError as e:
        result.error = f"could not open file \"{dot_file}\" for writing: {e}"
        logger.error("%s", result.error)
        return result

    try:
        if image_file is not None:
            render_image(dot_file, image_file, picture_format, dot_program)
            logger.info("Rendered %s", image_file)
        result.ok = True
    except GraphvizError as e:
        result.error = str(e)
        logger.error("%s", result.error)
    finally:
        if remove_dot:
            dot_file.unlink(missing_ok=True)
            logger.debug("Removed %s", dot_file)

    return result
