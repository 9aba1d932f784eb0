import pytest

from dsakit.binary_tree import height, inorder, preorder
from dsakit.doubly_linked import DoublyLinkedList
from dsakit.tree_build import build_tree, sorted_list_to_bst


def _dnode_preorder(node):
    if node is None:
        return []
    return [node.data, *_dnode_preorder(node.prev), *_dnode_preorder(node.next)]


def _dnode_inorder(node):
    if node is None:
        return []
    return [*_dnode_inorder(node.prev), node.data, *_dnode_inorder(node.next)]


def _dnode_height(node):
    if node is None:
        return 0
    return 1 + max(_dnode_height(node.prev), _dnode_height(node.next))


def test_build_tree_round_trip():
    ino = ["D", "B", "E", "A", "F", "C"]
    pre = ["A", "B", "D", "E", "C", "F"]
    root = build_tree(ino, pre)
    assert inorder(root) == ino
    assert preorder(root) == pre
    assert root.data == "A"


def test_build_tree_empty():
    assert build_tree([], []) is None


def test_build_tree_single():
    root = build_tree([7], [7])
    assert inorder(root) == [7]
    assert height(root) == 1


def test_build_tree_can_be_called_twice():
    first = build_tree([2, 1, 3], [1, 2, 3])
    second = build_tree([2, 1, 3], [1, 2, 3])
    assert preorder(first) == preorder(second) == [1, 2, 3]


def test_build_tree_length_mismatch():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1])


def test_build_tree_inconsistent_traversals():
    with pytest.raises(ValueError):
        build_tree([1, 2, 3], [4, 5, 6])


def test_sorted_list_to_bst_worked_example():
    root = sorted_list_to_bst(DoublyLinkedList(range(1, 8)).head)
    assert _dnode_preorder(root) == [4, 2, 1, 3, 6, 5, 7]


@pytest.mark.parametrize("size", [0, 1, 2, 5, 10, 31])
def test_sorted_list_to_bst_is_balanced_and_ordered(size):
    values = list(range(size))
    root = sorted_list_to_bst(DoublyLinkedList(values).head)
    assert _dnode_inorder(root) == values
    assert _dnode_height(root) == size.bit_length()