"""Node and Edge types for a parsed PostgreSQL node tree.

A node is created for every ``{`` (record) and every ``:`` (field) in the
input.  Two kinds are reached only by reclassification while the node is
still on the builder's stack:

- FIELD -> FOLDED : the field's value turned out to be a nested record.
- FIELD -> LIST   : the field's value turned out to be a ``( {..} ... )`` list.

Both reclassified kinds take over the anchor of the record that owns them, so
edges leaving them start at a port inside the owner's rendered table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto


class NodeKind(StrEnum):
    """Structural role of a node in the tree.

    - RECORD -> "record" : a ``{NAME ...}`` unit, rendered as its own table
    - LIST   -> "list"   : a field whose value is a list of records
    - FIELD  -> "field"  : a ``:name value`` unit, rendered as a table row
    - FOLDED -> "folded" : a field whose value is a single nested record
    """

    RECORD = auto()
    LIST = auto()
    FIELD = auto()
    FOLDED = auto()


@dataclass(frozen=True, slots=True)
class Edge:
    """A connection from a port of one record table to another record.

    Attributes:
        src_id:   Graph node id of the source table.
        src_port: Port of the source row (0 is the table header).
        dst_id:   Graph node id of the destination table.
        dst_port: Port of the destination row, always the header in practice.
        chained:  True when the edge links consecutive list elements (or a
                  list field to its first element) rather than a parent to a
                  child.
    """

    src_id: int
    src_port: int
    dst_id: int
    dst_port: int = 0
    chained: bool = False


@dataclass(slots=True)
class Node:
    """A node in the parsed tree.

    Attributes:
        kind:        Structural role (see NodeKind).
        label:       Sanitized name text; for fields this includes the value.
        sequence_id: Creation order, unique per parse, never rewritten.
        anchor_id:   Graph node id edges use when they start here.  Equal to
                     sequence_id except for FOLDED/LIST nodes, which anchor
                     on the record that owns them.
        field_index: 1-based position among the parent's children, 0 for the
                     root.  Used as the row port.
        children:    Owned child nodes in input order.
        edges:       Edges recorded while this node was the active parent.
    """

    kind: NodeKind
    label: str
    sequence_id: int
    anchor_id: int = -1
    field_index: int = 0
    children: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.anchor_id < 0:
            self.anchor_id = self.sequence_id

    @property
    def is_visible(self) -> bool:
        """Only records become tables of their own in the output graph."""
        return self.kind is NodeKind.RECORD

    def attach(self, child: Node) -> None:
        """Append ``child`` and assign its 1-based field index."""
        self.children.append(child)
        child.field_index = len(self.children)

    def fold_into(self, owner: Node) -> None:
        """Demote a field to an anchor for the record that follows it."""
        if self.kind is not NodeKind.FIELD:
            msg = f"only a field can be folded, got {self.kind}"
            raise ValueError(msg)
        self.kind = NodeKind.FOLDED
        self.anchor_id = owner.anchor_id

    def make_list(self, owner: Node) -> None:
        """Reinterpret this node as a list whose elements chain together."""
        self.kind = NodeKind.LIST
        self.anchor_id = owner.anchor_id
