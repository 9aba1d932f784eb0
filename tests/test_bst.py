import pytest

from dsakit.binary_tree import Node, inorder, preorder
from dsakit.bst import (
    ParentNode,
    binary_tree_to_bst,
    ceil,
    delete,
    has_pair_with_sum,
    insert,
    insert_allow_duplicates,
    insert_with_parent,
    inorder_successor,
    is_bst,
    lowest_common_ancestor,
    min_value,
    min_value_node,
)


def build(keys, inserter=insert):
    root = None
    for key in keys:
        root = inserter(root, key)
    return root


def find(root, key):
    while root is not None and root.data != key:
        root = root.left if key < root.data else root.right
    return root


def test_is_bst_accepts_source_example():
    root = Node(4, Node(2, Node(1), Node(3)), Node(5))
    assert is_bst(root) is True


def test_is_bst_rejects_violation_deep_in_tree():
    root = Node(4, Node(2, Node(1), Node(5)), Node(6))
    assert is_bst(root) is False


def test_is_bst_rejects_duplicates_and_accepts_empty():
    assert is_bst(Node(2, Node(2))) is False
    assert is_bst(None) is True


def test_insert_builds_sorted_tree_and_ignores_duplicates():
    keys = [50, 30, 20, 40, 70, 60, 80, 30]
    root = build(keys)
    assert inorder(root) == sorted(set(keys))
    assert is_bst(root)


def test_insert_allow_duplicates_keeps_all_keys():
    keys = [5, 3, 5, 7, 3]
    root = build(keys, insert_allow_duplicates)
    assert inorder(root) == sorted(keys)
    assert root.right.data == 5


def test_delete_sequence_from_source():
    root = build([50, 30, 20, 40, 70, 60, 80])
    root = delete(root, 20)
    assert inorder(root) == [30, 40, 50, 60, 70, 80]
    root = delete(root, 30)
    assert inorder(root) == [40, 50, 60, 70, 80]
    root = delete(root, 50)
    assert inorder(root) == [40, 60, 70, 80]
    assert root.data == 60


def test_delete_missing_key_leaves_tree_unchanged():
    keys = [50, 30, 70]
    root = build(keys)
    root = delete(root, 99)
    assert inorder(root) == sorted(keys)
    assert delete(None, 1) is None


def test_delete_last_node_gives_empty_tree():
    assert delete(Node(7), 7) is None


@pytest.fixture
def ceil_tree():
    return Node(8, Node(4, Node(2), Node(6)), Node(12, Node(10), Node(14)))


@pytest.mark.parametrize("value", range(16))
def test_ceil_matches_smallest_key_not_below(ceil_tree, value):
    keys = inorder(ceil_tree)
    expected = min((k for k in keys if k >= value), default=None)
    assert ceil(ceil_tree, value) == expected


def test_ceil_pinned_values(ceil_tree):
    assert ceil(ceil_tree, 5) == 6
    assert ceil(ceil_tree, 12) == 12
    assert ceil(ceil_tree, 15) is None


def test_min_value_of_source_tree():
    root = build([4, 2, 1, 3, 6, 5], insert_allow_duplicates)
    assert min_value(root) == 1
    assert min_value_node(root).data == 1


def test_min_value_of_empty_tree_raises():
    assert min_value_node(None) is None
    with pytest.raises(ValueError):
        min_value(None)


def test_insert_with_parent_links_parents():
    root = None
    for key in [20, 8, 22, 4, 12, 10, 14]:
        root = insert_with_parent(root, key)
    assert root.parent is None
    node = root.left.right.right
    assert node.data == 14
    assert node.parent.data == 12
    assert node.parent.parent is root.left


def test_inorder_successor_source_example():
    root = build([20, 8, 22, 4, 12, 10, 14], insert_with_parent)
    assert inorder_successor(root.left.right.right).data == 20


def test_inorder_successor_walks_whole_tree_in_order():
    keys = [20, 8, 22, 4, 12, 10, 14]
    root = build(keys, insert_with_parent)
    node = min_value_node(root)
    seen = []
    while node is not None:
        seen.append(node.data)
        node = inorder_successor(node)
    assert seen == sorted(keys)


def test_inorder_successor_of_last_is_none():
    root = ParentNode(1)
    assert inorder_successor(root) is None


@pytest.mark.parametrize("n1, n2, expected", [(10, 14, 12), (14, 8, 8), (10, 22, 20)])
def test_lowest_common_ancestor_source_cases(n1, n2, expected):
    root = Node(20, Node(8, Node(4), Node(12, Node(10), Node(14))), Node(22))
    assert lowest_common_ancestor(root, n1, n2).data == expected


def test_lowest_common_ancestor_of_empty_tree():
    assert lowest_common_ancestor(None, 1, 2) is None


@pytest.fixture
def pair_tree():
    return build([15, 10, 20, 8, 12, 16, 25])


@pytest.mark.parametrize("target", range(0, 60))
def test_pair_sum_agrees_with_all_pairs(pair_tree, target):
    keys = inorder(pair_tree)
    expected = any(
        a + b == target for i, a in enumerate(keys) for b in keys[i + 1 :]
    )
    assert has_pair_with_sum(pair_tree, target) is expected


def test_pair_sum_needs_two_nodes():
    assert has_pair_with_sum(Node(5), 10) is False
    assert has_pair_with_sum(None, 0) is False


def test_binary_tree_to_bst_source_example():
    root = Node(10, Node(30, Node(20)), Node(15, None, Node(5)))
    binary_tree_to_bst(root)
    assert inorder(root) == [5, 10, 15, 20, 30]
    assert root.data == 15
    assert is_bst(root)


def test_binary_tree_to_bst_keeps_shape():
    root = Node(3, Node(1, Node(2)), Node(9))
    binary_tree_to_bst(root)
    assert preorder(root) == [3, 2, 1, 9]
    assert root.left.left is not None and root.right.left is None
    assert is_bst(root)


def test_found_helper_after_inserts():
    root = build([5, 2, 8])
    assert find(root, 8) is root.right
    assert find(delete(root, 8), 8) is None