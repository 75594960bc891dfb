"""Binary tree node and structural edits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node records its parent but does not attach it to that
    parent; assign it to ``parent.left`` or ``parent.right`` to link it.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child becomes its left child."""
        new = Node(value, parent=self)
        if self.left is not None:
            new.left = self.left
            new.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child becomes its right child."""
        new = Node(value, parent=self)
        if self.right is not None:
            new.right = self.right
            new.right.parent = new
        self.right = new
        return new

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None


def delete(tree: Optional[Node]) -> None:
    """Dismantle the subtree rooted at ``tree`` and detach it from its parent."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        elif parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                stack.append(child)
        node.parent = node.left = node.right = None