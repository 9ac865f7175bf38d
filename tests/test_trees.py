import pytest

from algosolve.trees import (
    TreeNode,
    all_possible_fbt,
    build_tree,
    path_sum,
    preorder_traversal,
    search_bst,
    tree_from_level_order,
    tree_to_level_order,
    zigzag_level_order,
)

LEVEL_ORDERS = [
    [],
    [1],
    [3, 9, 20, None, None, 15, 7],
    [1, None, 2, 3],
    [10, 5, -3, 3, 2, None, 11, 3, -2, None, 1],
]

UNIQUE_LEVEL_ORDERS = [
    [1],
    [3, 9, 20, None, None, 15, 7],
    [1, None, 2, 3],
    [4, 2, 7, 1, 3, 6, 9],
    [5, 4, None, 3, None, 2],
]


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.val] + _inorder(node.right)


def _count(node):
    if node is None:
        return 0
    return 1 + _count(node.left) + _count(node.right)


def _is_full(node):
    if node is None:
        return True
    if (node.left is None) != (node.right is None):
        return False
    return _is_full(node.left) and _is_full(node.right)


@pytest.mark.parametrize("values", LEVEL_ORDERS)
def test_level_order_round_trip(values):
    assert tree_to_level_order(tree_from_level_order(values)) == values


def test_level_order_none_root():
    assert tree_from_level_order([None]) is None


def test_zigzag_example():
    root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
    assert zigzag_level_order(root) == [[3], [20, 9], [15, 7]]


def test_zigzag_empty_and_single():
    assert zigzag_level_order(None) == []
    assert zigzag_level_order(TreeNode(1)) == [[1]]


def test_zigzag_covers_every_node():
    root = tree_from_level_order([10, 5, -3, 3, 2, None, 11, 3, -2, None, 1])
    levels = zigzag_level_order(root)
    flat = [v for level in levels for v in level]
    assert sorted(flat) == sorted(preorder_traversal(root))
    assert levels[0] == [root.val]


@pytest.mark.parametrize("values", UNIQUE_LEVEL_ORDERS)
def test_build_tree_round_trip(values):
    original = tree_from_level_order(values)
    rebuilt = build_tree(preorder_traversal(original), _inorder(original))
    assert tree_to_level_order(rebuilt) == values


def test_build_tree_empty():
    assert build_tree([], []) is None


def test_preorder_root_first_and_all_values():
    values = [4, 2, 7, 1, 3, 6, 9]
    root = tree_from_level_order(values)
    result = preorder_traversal(root)
    assert result[0] == root.val
    assert sorted(result) == sorted(values)


def test_preorder_right_chain():
    root = tree_from_level_order([1, None, 2, None, 3])
    assert preorder_traversal(root) == [1, 2, 3]


def test_preorder_empty():
    assert preorder_traversal(None) == []


def test_path_sum_example():
    root = tree_from_level_order([10, 5, -3, 3, 2, None, 11, 3, -2, None, 1])
    assert path_sum(root, 8) == 3


def test_path_sum_single_node():
    assert path_sum(TreeNode(5), 5) == 1
    assert path_sum(TreeNode(5), 4) == 0
    assert path_sum(None, 0) == 0


def test_search_bst_finds_subtree():
    root = tree_from_level_order([4, 2, 7, 1, 3])
    found = search_bst(root, 2)
    assert found is root.left
    assert tree_to_level_order(found) == [2, 1, 3]


def test_search_bst_missing():
    root = tree_from_level_order([4, 2, 7, 1, 3])
    assert search_bst(root, 5) is None


@pytest.mark.parametrize("n", [0, 2, 4])
def test_fbt_even_has_none(n):
    assert all_possible_fbt(n) == []


def test_fbt_single():
    trees = all_possible_fbt(1)
    assert [tree_to_level_order(t) for t in trees] == [[0]]


def test_fbt_seven_count():
    assert len(all_possible_fbt(7)) == 5


@pytest.mark.parametrize("n", [3, 5, 7, 9])
def test_fbt_trees_are_full_and_distinct(n):
    trees = all_possible_fbt(n)
    shapes = {tuple(tree_to_level_order(t)) for t in trees}
    assert len(shapes) == len(trees)
    for tree in trees:
        assert _count(tree) == n
        assert _is_full(tree)