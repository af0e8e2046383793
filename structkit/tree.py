"""General tree whose nodes live in a fixed-size table addressed by id."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

_DEFAULT_MAX_NODES = 10001


@dataclass
class TreeNode:
    """A node carrying data and its children, most recently added first."""

    data: Any = None
    children: list["TreeNode"] = field(default_factory=list)

    def add_child(self, child: "TreeNode") -> None:
        """Attach ``child`` ahead of the existing children."""
        self.children.insert(0, child)


class Tree:
    """Tree of ``max_node`` preallocated nodes linked by ``add_child``."""

    def __init__(self, max_node: int = _DEFAULT_MAX_NODES) -> None:
        if max_node < 0:
            raise ValueError("max_node must not be negative")
        self._nodes = [TreeNode() for _ in range(max_node)]
        self.root: Optional[TreeNode] = None

    def node(self, node_id: int) -> TreeNode:
        """Return the node with id ``node_id``."""
        if not 0 <= node_id < len(self._nodes):
            raise IndexError(f"node id {node_id} out of range")
        return self._nodes[node_id]

    def set_root(self, root_id: int) -> None:
        """Make node ``root_id`` the root."""
        self.root = self.node(root_id)

    def add_child(self, parent_id: int, child_id: int) -> None:
        """Link node ``child_id`` under node ``parent_id``."""
        self.node(parent_id).add_child(self.node(child_id))

    def assign_data(self, node_id: int, data: Any) -> None:
        """Store ``data`` in node ``node_id``."""
        self.node(node_id).data = data

    def depth_first(self, node_id: Optional[int] = None) -> Iterator[Any]:
        """Yield node data in pre-order from ``node_id``, or from the root."""
        if node_id is None:
            if self.root is None:
                raise ValueError("tree has no root")
            start = self.root
        else:
            start = self.node(node_id)
        pending = [start]
        while pending:
            current = pending.pop()
            yield current.data
            pending.extend(reversed(current.children))