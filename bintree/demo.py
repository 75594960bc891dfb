"""Demonstration scenarios exercising the tree operations."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional, TextIO

from bintree import metrics
from bintree.node import Node, delete
from bintree.printing import print_tree
from bintree.traversal import inorder, postorder, preorder

_SCENARIOS: Dict[int, Callable[[TextIO], None]] = {}


def _scenario(number: int):
    def register(func: Callable[[TextIO], None]) -> Callable[[TextIO], None]:
        _SCENARIOS[number] = func
        return func

    return register


def _attach_left(parent: Node, value: int) -> Node:
    parent.left = Node(value, parent=parent)
    return parent.left


def _attach_right(parent: Node, value: int) -> Node:
    parent.right = Node(value, parent=parent)
    return parent.right


def _basic() -> Node:
    root = Node(98)
    _attach_left(root, 12)
    _attach_right(root, 402)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _seven(inner_left: int) -> Node:
    root = Node(98)
    left = _attach_left(root, 12)
    right = _attach_right(root, 402)
    _attach_left(left, 6)
    _attach_right(left, inner_left)
    _attach_left(right, 256)
    _attach_right(right, 512)
    return root


def _family() -> Node:
    root = Node(98)
    left = _attach_left(root, 12)
    right = _attach_right(root, 128)
    _attach_right(left, 54)
    far = _attach_right(right, 402)
    _attach_left(left, 10)
    _attach_left(right, 110)
    _attach_left(far, 200)
    _attach_right(far, 512)
    return root


def _write_values(values, out: TextIO) -> None:
    for value in values:
        out.write(f"{value}\n")


def _name(node: Optional[Node]) -> str:
    return "(nil)" if node is None else str(node.value)


@_scenario(0)
def _create(out: TextIO) -> None:
    print_tree(_seven(16), out)


@_scenario(1)
def _insert_left(out: TextIO) -> None:
    root = Node(98)
    _attach_left(root, 12)
    _attach_right(root, 402)
    print_tree(root, out)
    out.write("\n")
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


@_scenario(2)
def _insert_right(out: TextIO) -> None:
    root = Node(98)
    _attach_left(root, 12)
    _attach_right(root, 402)
    print_tree(root, out)
    out.write("\n")
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


@_scenario(3)
def _delete(out: TextIO) -> None:
    root = _basic()
    print_tree(root, out)
    delete(root)


@_scenario(4)
def _is_leaf(out: TextIO) -> None:
    root = _basic()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        out.write(f"Is {node.value} a leaf: {int(node.is_leaf())}\n")


@_scenario(5)
def _is_root(out: TextIO) -> None:
    root = _basic()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        out.write(f"Is {node.value} a root: {int(node.is_root())}\n")


@_scenario(6)
def _preorder(out: TextIO) -> None:
    root = _seven(56)
    print_tree(root, out)
    _write_values(preorder(root), out)


@_scenario(7)
def _inorder(out: TextIO) -> None:
    root = _seven(56)
    print_tree(root, out)
    _write_values(inorder(root), out)


@_scenario(8)
def _postorder(out: TextIO) -> None:
    root = _seven(56)
    print_tree(root, out)
    _write_values(postorder(root), out)


def _measure(out: TextIO, template: str, func: Callable[[Node], int]) -> None:
    root = _basic()
    print_tree(root, out)
    for node in (root, root.right, root.left.right):
        out.write(template.format(value=node.value, result=func(node)) + "\n")


@_scenario(9)
def _height(out: TextIO) -> None:
    _measure(out, "Height from {value}: {result}", metrics.height)


@_scenario(10)
def _depth(out: TextIO) -> None:
    _measure(out, "Depth of {value}: {result}", metrics.depth)


@_scenario(11)
def _size(out: TextIO) -> None:
    _measure(out, "Size of {value}: {result}", metrics.size)


@_scenario(12)
def _leaves(out: TextIO) -> None:
    _measure(out, "Leaves in {value}: {result}", metrics.leaves)


@_scenario(13)
def _nodes(out: TextIO) -> None:
    _measure(out, "Nodes in {value}: {result}", metrics.internal_nodes)


@_scenario(14)
def _balance(out: TextIO) -> None:
    root = _basic()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        out.write(f"Balance of {node.value}: {metrics.balance(node):+d}\n")


@_scenario(15)
def _is_full(out: TextIO) -> None:
    root = _basic()
    _attach_left(root.left, 10)
    print_tree(root, out)
    for node in (root, root.left, root.right):
        out.write(f"Is {node.value} full: {int(metrics.is_full(node))}\n")


@_scenario(16)
def _is_perfect(out: TextIO) -> None:
    root = _basic()
    _attach_left(root.left, 10)
    _attach_left(root.right, 10)
    print_tree(root, out)
    out.write(f"Perfect: {int(metrics.is_perfect(root))}\n\n")
    _attach_left(root.right.right, 10)
    print_tree(root, out)
    out.write(f"Perfect: {int(metrics.is_perfect(root))}\n\n")
    _attach_right(root.right.right, 10)
    print_tree(root, out)
    out.write(f"Perfect: {int(metrics.is_perfect(root))}\n")


@_scenario(17)
def _sibling(out: TextIO) -> None:
    root = _family()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        out.write(f"Sibling of {node.value}: {_name(metrics.sibling(node))}\n")


@_scenario(18)
def _uncle(out: TextIO) -> None:
    root = _family()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        out.write(f"Uncle of {node.value}: {_name(metrics.uncle(node))}\n")


def run_scenario(number: int, out: Optional[TextIO] = None) -> None:
    """Run demonstration ``number`` (0-18), writing its output to ``out``."""
    try:
        func = _SCENARIOS[number]
    except KeyError:
        raise ValueError(f"unknown scenario: {number}") from None
    func(out if out is not None else sys.stdout)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the requested scenarios, or all of them when none are named."""
    parser = argparse.ArgumentParser(prog="bintree", description=__doc__)
    parser.add_argument(
        "scenarios",
        nargs="*",
        type=int,
        choices=sorted(_SCENARIOS),
        metavar="N",
        help="scenario numbers to run (default: all)",
    )
    args = parser.parse_args(argv)
    for number in args.scenarios or sorted(_SCENARIOS):
        run_scenario(number, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())