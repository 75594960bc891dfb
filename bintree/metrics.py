"""Measurements and relationships within a binary tree."""

from __future__ import annotations

from typing import Optional

from bintree.node import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for a leaf or None."""
    if tree is None or (tree.left is None and tree.right is None):
        return 0
    return max(height(tree.left), height(tree.right)) + 1


def depth(tree: Optional[Node]) -> int:
    """Return the number of edges from the node up to the root; 0 for None."""
    count = 0
    if tree is None:
        return count
    while tree.parent is not None:
        tree = tree.parent
        count += 1
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return size(tree.left) + size(tree.right) + 1


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.left is None and tree.right is None:
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None or (tree.left is None and tree.right is None):
        return 0
    return internal_nodes(tree.left) + internal_nodes(tree.right) + 1


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree height minus the right subtree height; 0 for None."""
    if tree is None:
        return 0
    left = height(tree.left) + 1 if tree.left is not None else 0
    right = height(tree.right) + 1 if tree.right is not None else 0
    return left - right


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all its leaves share one level."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is None or tree.right is None:
        return False
    if height(tree.left) != height(tree.right):
        return False
    return is_perfect(tree.left) and is_perfect(tree.right)


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of the node's parent, or None."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    if node.parent.right is node:
        return node.parent.left
    return None


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of the node's parent, or None."""
    if node is None or node.parent is None or node.parent.parent is None:
        return None
    grandparent = node.parent.parent
    if node.parent is grandparent.left:
        return grandparent.right
    return grandparent.left