import pytest

from bintree.node import Node
from bintree.traversal import inorder, postorder, preorder


@pytest.fixture
def tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_preorder(tree):
    assert list(preorder(tree)) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder(tree):
    assert list(inorder(tree)) == [6, 12, 56, 98, 256, 402, 512]


def test_postorder(tree):
    assert list(postorder(tree)) == [6, 56, 12, 256, 512, 402, 98]


def test_inorder_of_search_tree_is_sorted(tree):
    values = list(inorder(tree))
    assert values == sorted(values)


def test_traversals_visit_same_values(tree):
    assert sorted(preorder(tree)) == sorted(inorder(tree)) == sorted(postorder(tree))


def test_root_first_in_preorder_last_in_postorder(tree):
    assert next(iter(preorder(tree))) == tree.value
    assert list(postorder(tree))[-1] == tree.value


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_empty_tree_yields_nothing(walk):
    assert list(walk(None)) == []


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_single_node(walk):
    assert list(walk(Node(7))) == [7]