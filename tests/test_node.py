from bintree.node import Node, delete


def make_root():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    return root


def test_node_records_parent_without_attaching():
    root = Node(98)
    child = Node(12, root)
    assert child.parent is root
    assert root.left is None and root.right is None
    assert child.value == 12


def test_insert_left_into_empty_slot():
    root = make_root()
    right = root.right
    new = right.insert_left(128)
    assert right.left is new
    assert new.parent is right
    assert new.value == 128
    assert new.left is None and new.right is None


def test_insert_left_pushes_existing_child_down():
    root = make_root()
    old_left = root.left
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old_left
    assert old_left.parent is new
    assert new.right is None
    assert new.parent is root


def test_insert_right_pushes_existing_child_down():
    root = make_root()
    old_right = root.right
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old_right
    assert old_right.parent is new
    assert new.left is None


def test_insert_right_into_empty_slot():
    root = make_root()
    new = root.left.insert_right(54)
    assert root.left.right is new
    assert new.parent is root.left
    assert new.right is None


def test_is_leaf():
    root = make_root()
    root.left.insert_right(54)
    root.insert_right(128)
    assert not root.is_leaf()
    assert not root.right.is_leaf()
    assert root.right.right.is_leaf()
    assert root.right.right.value == 402


def test_is_root():
    root = make_root()
    root.insert_right(128)
    assert root.is_root()
    assert not root.right.is_root()
    assert not root.right.right.is_root()


def test_delete_detaches_subtree_and_clears_links():
    root = make_root()
    left = root.left
    grandchild = left.insert_right(54)
    delete(left)
    assert root.left is None
    assert root.right.parent is root
    assert left.parent is None and left.right is None
    assert grandchild.parent is None


def test_delete_whole_tree_and_none():
    root = make_root()
    right = root.right
    delete(root)
    assert root.left is None and root.right is None
    assert right.parent is None
    delete(None)
    assert root.is_leaf()


def test_repr_does_not_recurse():
    root = make_root()
    text = repr(root.left)
    assert "12" in text
    assert "402" not in text