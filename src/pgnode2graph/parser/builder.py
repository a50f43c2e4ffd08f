"""TreeBuilder: single-pass stack parser for PostgreSQL node tree dumps.

The input is the text printed by ``pprint()``/``nodeToString()`` in the
server, e.g.::

    {QUERY :commandType 1 :jointree {FROMEXPR :fromlist ({RANGETBLREF :rtindex 1})}}

Five characters drive the parser; everything else is skipped:

- ``{``  opens a record.  If the previous unit was a field, that field is
         folded: it becomes the anchor the new record hangs from.
- ``:``  opens a field of the record on top of the stack.  Fields are not
         pushed; their value text is part of their label.
- ``(``  turns the last child of the top node into a list and pushes it.
- ``)``  pops a list.
- ``}``  pops a record.  Popping the last entry ends the parse.

Edges are computed here, while the stack still knows who the parent is, and
stored on the node that was on top of the stack at the time.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pgnode2graph.parser.nodes import Edge, Node, NodeKind
from pgnode2graph.parser.scanner import Cursor, scan_name

logger = logging.getLogger(__name__)


class MalformedTreeError(ValueError):
    """Raised when the input does not form exactly one balanced record."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} (at offset {offset})")
        self.offset = offset


class TreeBuilder:
    """Builds a Node tree from one dump.

    A builder instance is single-use: create one per document.  After
    ``build()`` returns, ``consumed`` is the offset just past the closing
    ``}`` of the root record; any text after it is ignored.
    """

    def __init__(self, text: str) -> None:
        self._cursor = Cursor(text)
        self._stack: list[Node] = []
        self._next_id = 0
        self._prev_is_field = False
        self.consumed = 0

    def build(self) -> Node:
        """Parse the text and return the root record.

        Raises:
            MalformedTreeError: On a closer or field with nothing open, a
                list with no preceding child, or end of input inside a
                record.
        """
        cursor = self._cursor
        while not cursor.at_end():
            ch = cursor.read()
            if ch == "{":
                self._open_record()
            elif ch == ":":
                self._open_field()
            elif ch == "(":
                self._open_list()
            elif ch == ")":
                self._pop("list")
            elif ch == "}":
                node = self._pop("record")
                if not self._stack:
                    self.consumed = cursor.pos
                    return node

        if self._stack:
            raise MalformedTreeError(
                f"unterminated structure, {len(self._stack)} level(s) still open",
                cursor.pos,
            )
        raise MalformedTreeError("no node tree found", cursor.pos)

    def _new_node(self, kind: NodeKind) -> Node:
        node = Node(kind=kind, label=scan_name(self._cursor), sequence_id=self._next_id)
        self._next_id += 1
        return node

    def _error(self, message: str) -> MalformedTreeError:
        # The offending character has already been read.
        return MalformedTreeError(message, self._cursor.pos - 1)

    def _open_record(self) -> None:
        node = self._new_node(NodeKind.RECORD)

        if self._stack:
            top = self._stack[-1]
            if self._prev_is_field:
                owner = top
                top = owner.children[-1]
                top.fold_into(owner)

            src_id, src_port = top.anchor_id, top.field_index
            # List elements chain one after another instead of fanning out.
            if top.kind is NodeKind.LIST and top.children:
                src_id, src_port = top.children[-1].anchor_id, 0

            top.edges.append(
                Edge(
                    src_id=src_id,
                    src_port=src_port,
                    dst_id=node.anchor_id,
                    chained=top.kind is NodeKind.LIST,
                )
            )
            top.attach(node)

        self._stack.append(node)
        self._prev_is_field = False
        logger.debug("push record %s at depth %d", node.label, len(self._stack))

    def _open_field(self) -> None:
        if not self._stack:
            raise self._error("field outside of any record")
        node = self._new_node(NodeKind.FIELD)
        self._stack[-1].attach(node)
        self._prev_is_field = True

    def _open_list(self) -> None:
        if not self._stack:
            raise self._error("list outside of any record")
        top = self._stack[-1]
        if not top.children:
            raise self._error(f"list without a preceding field in {top.label!r}")

        node = top.children[-1]
        node.make_list(top)
        self._stack.append(node)
        self._prev_is_field = False
        logger.debug("push list %s at depth %d", node.label, len(self._stack))

    def _pop(self, what: str) -> Node:
        if not self._stack:
            raise self._error(f"unmatched {what} closer")
        node = self._stack.pop()
        self._prev_is_field = False
        logger.debug("pop %s %s at depth %d", what, node.label, len(self._stack))
        return node


def parse_node_tree(text: str) -> Node:
    """Parse one node tree dump.

    Plain text before the first ``{`` is skipped, but a stray ``:``, ``(``,
    ``)`` or ``}`` there is still a MalformedTreeError.
    """
    return TreeBuilder(text).build()


def parse_node_tree_file(path: Path) -> Node:
    """Read ``path`` fully and parse the node tree it contains."""
    return parse_node_tree(path.read_text(encoding="utf-8", errors="replace"))
