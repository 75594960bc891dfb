# bintree

A small library for building and inspecting binary trees of integers.

## Building a tree

```python
from bintree.node import Node

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)
```

A `Node` is a dataclass with a `value` and links to its `parent`, `left`
and `right` nodes. `insert_left` and `insert_right` add a new child and
return it. If that side already has a child, the old child moves down
one level and becomes the new node's child on the same side.

Creating a node with `Node(value, parent=p)` records the parent but does
not attach the node to it. Assign it to `p.left` or `p.right` to link it.

`node.is_leaf()` is true when the node has no children.
`node.is_root()` is true when the node has no parent.

`bintree.node.delete(tree)` detaches a subtree from its parent and clears
every link inside that subtree.

## Traversals

`bintree.traversal` provides `preorder`, `inorder` and `postorder`. Each
is a generator that yields the values of a tree in its order:

```python
from bintree.traversal import inorder

list(inorder(root))
```

Passing `None` yields nothing.

## Metrics

`bintree.metrics` provides these functions:

- `height(tree)`: edges on the longest downward path. A single node has height 0.
- `depth(tree)`: edges from the node up to the root.
- `size(tree)`: number of nodes.
- `leaves(tree)`: number of nodes without children.
- `internal_nodes(tree)`: number of nodes with at least one child.
- `balance(tree)`: height of the left subtree minus height of the right
  subtree. A missing subtree counts as 0 and a present one as its height plus 1.
- `is_full(tree)`: true if every node has either zero or two children.
- `is_perfect(tree)`: true if the tree is full and all leaves are at the same depth.
- `sibling(node)`: the other child of the node's parent, or `None`.
- `uncle(node)`: the sibling of the node's parent, or `None`.

Each function accepts `None`. The counting functions return 0 for it,
and `is_full` and `is_perfect` return `False`.

## Printing

`bintree.printing.render(tree)` returns the tree as ASCII art, one line
per level, with each value written as at least three digits. `print_tree(tree, file)`
writes the same drawing to a stream, or to standard output when `file`
is omitted:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## Demo

The package installs a command, `bintree-demo`, that runs the bundled
example scenarios, numbered 0 to 18. Each scenario builds a tree, prints
it and shows the result of one operation:

```
bintree-demo 14
```

You can give several numbers. With no numbers the command runs every
scenario in turn. The same scenarios are available from Python as
`bintree.demo.run_scenario(number, out)`. It raises `ValueError` for an
unknown number.

## Scope

This is an in-memory library only. It does not search, sort or rebalance
a tree, and it does not save trees to storage or load them from it.