"""Parsing of PostgreSQL node tree dumps into Node trees."""

from pgnode2graph.parser.builder import (
    MalformedTreeError,
    TreeBuilder,
    parse_node_tree,
    parse_node_tree_file,
)
from pgnode2graph.parser.nodes import Edge, Node, NodeKind

__all__ = [
    "Edge",
    "MalformedTreeError",
    "Node",
    "NodeKind",
    "TreeBuilder",
    "parse_node_tree",
    "parse_node_tree_file",
]
