"""Graphviz DOT output for parsed node trees.

Every RECORD node becomes one DOT node drawn as an HTML-like table: a bold
header cell holding the record name (port ``f0``) and one row per field
(port ``f<field_index>``).  LIST and FOLDED nodes are not drawn; they show up
as a row in their owner's table and the edges they carry start from that row.

Nodes are written first, in breadth-first order, then all edges.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from pgnode2graph.parser.nodes import Edge, Node, NodeKind
from pgnode2graph.render.colors import ColorMap

GRAPH_HEADER = (
    "digraph PGNodeGraph {\n"
    "node [shape=none];\n"
    "rankdir=LR;\n"
    'size="100000,100000";\n'
)
GRAPH_FOOTER = "}\n"

# PostgreSQL prints NULL pointers as "<>", which labels carry as "--".
EMPTY_MARKER = "--"

LIST_EDGE_STYLE = " [color=blue]"
CHILD_EDGE_STYLE = " [color=green]"


@dataclass(frozen=True)
class RenderOptions:
    """Output switches. ``colors`` is only consulted when enable_color is set."""

    enable_color: bool = False
    skip_empty: bool = False
    colors: ColorMap = field(default_factory=dict)


def is_empty_field(label: str) -> bool:
    return EMPTY_MARKER in label


def format_edge(edge: Edge, enable_color: bool = False) -> str:
    style = ""
    if enable_color:
        style = LIST_EDGE_STYLE if edge.chained else CHILD_EDGE_STYLE
    return (
        f"node_{edge.src_id}:f{edge.src_port} -> "
        f"node_{edge.dst_id}:f{edge.dst_port}{style};"
    )


def format_colnames(label: str) -> str:
    """Lay out a ``colnames ( a b c )`` label as a nested two-column table.

    The text up to and including ``(`` goes in the first row, each column
    name gets its own indented row, and the closing token is put back in
    the first column.
    """
    if label == f"colnames {EMPTY_MARKER}":
        return label

    pos = label.find("(")
    head, rest = label[: pos + 1], label[pos + 1 :]
    tokens = rest.split()

    parts = ['    \n<table border="0" cellspacing="0"> \n']
    parts.append(_colnames_row(head, ""))
    for token in tokens[:-1]:
        parts.append(_colnames_row("", token, align_second=True))
    if tokens:
        parts.append(_colnames_row(tokens[-1], ""))
    parts.append("    </table>\n")
    return "".join(parts)


def _colnames_row(first: str, second: str, align_second: bool = False) -> str:
    align = ' align="left"' if align_second else ""
    return (
        "      <tr>\n"
        f"        <td>{first}</td>\n"
        f"        <td{align}>{second}</td>\n"
        "      </tr>\n"
    )


class DotWriter:
    """Linearizes a Node tree into a DOT document."""

    def __init__(self, options: RenderOptions | None = None) -> None:
        self._options = options or RenderOptions()

    def write(self, root: Node) -> str:
        parts = [GRAPH_HEADER]
        parts.extend(f"{block}\n" for block in self.node_blocks(root))
        parts.extend(f"{edge}\n" for edge in self.edge_lines(root))
        parts.append(GRAPH_FOOTER)
        return "".join(parts)

    def node_blocks(self, root: Node) -> Iterator[str]:
        """Yield one table per visible record, breadth-first."""
        queue: deque[Node] = deque([root])
        while queue:
            parent = queue.popleft()
            rows: list[str] = []
            for child in parent.children:
                if child.children or child.kind is NodeKind.RECORD:
                    queue.append(child)
                if child.kind is NodeKind.RECORD:
                    continue
                if self._options.skip_empty and is_empty_field(child.label):
                    continue
                rows.append(self._row(child.field_index, child.label))

            if parent.is_visible:
                yield self._header(parent.anchor_id, parent.label) + "".join(rows) + self._footer()

    def edge_lines(self, root: Node) -> Iterator[str]:
        """Yield every recorded edge, visiting nodes breadth-first."""
        queue: deque[Node] = deque([root])
        while queue:
            node = queue.popleft()
            queue.extend(node.children)
            for edge in node.edges:
                yield format_edge(edge, self._options.enable_color)

    def _header(self, node_id: int, label: str) -> str:
        brcolor = bgcolor = ftcolor = ""
        color = self._options.colors.get(label) if self._options.enable_color else None
        if color is not None:
            # The border takes the background color.
            if color.bgcolor:
                bgcolor = f' bgcolor="{color.bgcolor}"'
                brcolor = f' color="{color.bgcolor}"'
            if color.fontcolor:
                ftcolor = f' color="{color.fontcolor}"'

        return (
            f"node_{node_id} [\n"
            f'  label=<<table border="0" cellspacing="0"{brcolor}>\n'
            "    <tr>\n"
            f'      <td port="f0" border="1"{bgcolor}>\n'
            f"       <B><font{ftcolor}>{label}</font></B>\n"
            "      </td>\n"
            "    </tr>\n"
        )

    @staticmethod
    def _row(port: int, label: str) -> str:
        if "colnames" in label:
            label = format_colnames(label)
        return f'    <tr><td port="f{port}" border="1">{label}</td></tr>\n'

    @staticmethod
    def _footer() -> str:
        return "  </table>>\n];"


def write_dot(root: Node, options: RenderOptions | None = None) -> str:
    """Render ``root`` as a complete DOT document."""
    return DotWriter(options).write(root)
