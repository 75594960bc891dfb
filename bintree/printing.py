"""Text rendering of a binary tree as an ASCII diagram."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from bintree.metrics import height
from bintree.node import Node


def _put(row: List[str], pos: int, ch: str) -> None:
    if pos >= len(row):
        row.extend(" " * (pos - len(row) + 1))
    row[pos] = ch


def _layout(tree: Optional[Node], offset: int, level: int, rows: List[List[str]]) -> int:
    """Place ``tree`` into ``rows`` starting at column ``offset``; return its width."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _layout(tree.left, offset, level + 1, rows)
    right = _layout(tree.right, offset + left + width, level + 1, rows)
    for i, ch in enumerate(label):
        _put(rows[level], offset + left + i, ch)
    if level:
        above = rows[level - 1]
        if is_left:
            for i in range(width + right):
                _put(above, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the diagram of ``tree``, one newline-terminated line per level."""
    if tree is None:
        return ""
    rows: List[List[str]] = [[] for _ in range(height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row)
        # The first two columns are always kept, even when blank.
        lines.append(text[:2].ljust(2) + text[2:].rstrip(" "))
    return "".join(line + "\n" for line in lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the diagram of ``tree`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))