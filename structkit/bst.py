"""Binary search tree holding unique, ordered values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class _Node:
    val: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Unbalanced binary search tree; inserting an existing value does nothing."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, val: Any) -> None:
        """Insert ``val`` unless it is already present."""
        if self._root is None:
            self._root = _Node(val)
            return
        node = self._root
        while True:
            if val > node.val:
                if node.right is None:
                    node.right = _Node(val)
                    return
                node = node.right
            elif val < node.val:
                if node.left is None:
                    node.left = _Node(val)
                    return
                node = node.left
            else:
                return

    def remove(self, val: Any) -> None:
        """Remove ``val`` if present; a node with two children takes its successor's value."""
        self._root = self._remove(self._root, val)

    def _remove(self, node: Optional[_Node], val: Any) -> Optional[_Node]:
        if node is None:
            return None
        if val > node.val:
            node.right = self._remove(node.right, val)
        elif val < node.val:
            node.left = self._remove(node.left, val)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.val = successor.val
            node.right = self._remove(node.right, successor.val)
        return node

    def __contains__(self, val: Any) -> bool:
        node = self._root
        while node is not None:
            if val > node.val:
                node = node.right
            elif val < node.val:
                node = node.left
            else:
                return True
        return False

    def inorder(self) -> list:
        """Return the values in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        pending: list[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.val
            node = node.right

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"