"""DOT rendering of parsed node trees."""

from pgnode2graph.render.colors import (
    DEFAULT_NODE_COLORS,
    ColorMapError,
    NodeColor,
    default_color_map,
    load_color_map,
    parse_color_map,
)
from pgnode2graph.render.dot import DotWriter, RenderOptions, write_dot

__all__ = [
    "DEFAULT_NODE_COLORS",
    "ColorMapError",
    "DotWriter",
    "NodeColor",
    "RenderOptions",
    "default_color_map",
    "load_color_map",
    "parse_color_map",
    "write_dot",
]
