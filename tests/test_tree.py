import io
import random

import pytest

from bstqueue.tree import BSTree


def int_cmp(a, b):
    return (a > b) - (a < b)


def make_tree(values):
    tree = BSTree(int_cmp, str)
    for value in values:
        tree.insert(value)
    return tree


def test_requires_callables():
    with pytest.raises(TypeError):
        BSTree(None, str)
    with pytest.raises(TypeError):
        BSTree(int_cmp, None)


def test_empty_tree():
    tree = BSTree(int_cmp, str)
    assert tree.is_empty()
    assert len(tree) == 0
    assert tree.depth() == 0
    assert tree.find_min() is None
    assert tree.find_max() is None
    assert list(tree) == []


def test_empty_tree_prints_newline_only():
    tree = BSTree(int_cmp, str)
    out = io.StringIO()
    assert tree.print_inorder(out) == 1
    assert out.getvalue() == "\n"


def test_traversal_orders():
    tree = make_tree([5, 3, 8, 1, 4])
    assert list(tree.preorder()) == [5, 3, 1, 4, 8]
    assert list(tree.postorder()) == [1, 4, 3, 8, 5]
    assert list(tree.inorder()) == sorted([5, 3, 8, 1, 4])


def test_print_preorder_output_and_count():
    tree = make_tree([5, 3, 8, 1, 4])
    out = io.StringIO()
    count = tree.print_preorder(out)
    assert out.getvalue() == "53148\n"
    assert count == len(out.getvalue())


def test_print_counts_match_written_text():
    tree = make_tree([10, 200, 3000, 4])
    for method in (tree.print_inorder, tree.print_postorder, tree.print_preorder):
        out = io.StringIO()
        count = method(out)
        assert count == len(out.getvalue())
        assert out.getvalue().endswith("\n")


def test_duplicates_are_ignored():
    tree = make_tree([2, 1, 2, 3, 1])
    assert len(tree) == 3
    assert list(tree) == [1, 2, 3]


def test_insert_none_rejected():
    tree = BSTree(int_cmp, str)
    with pytest.raises(ValueError):
        tree.insert(None)


def test_min_max_and_contains():
    values = [17, 4, 29, 11, 2, 40]
    tree = make_tree(values)
    assert tree.find_min() == min(values)
    assert tree.find_max() == max(values)
    for value in values:
        assert value in tree
    assert 5 not in tree
    assert not tree.is_empty()


def test_depth_of_sorted_insertion_is_linear():
    values = list(range(50))
    tree = make_tree(values)
    assert tree.depth() == len(values)


def test_depth_of_perfect_tree():
    tree = make_tree([4, 2, 6, 1, 3, 5, 7])
    assert 2 ** tree.depth() - 1 == len(tree)


def test_large_degenerate_tree_has_no_recursion_limit():
    values = list(range(5000))
    tree = make_tree(values)
    assert list(tree) == values
    assert list(tree.postorder()) == values[::-1]
    assert tree.find_max() == values[-1]


@pytest.mark.parametrize("victim", [1, 4, 3, 8, 5])
def test_remove_each_kind_of_node(victim):
    values = [5, 3, 8, 1, 4]
    tree = make_tree(values)
    tree.remove(victim)
    remaining = sorted(v for v in values if v != victim)
    assert list(tree) == remaining
    assert len(tree) == len(remaining)
    assert victim not in tree


def test_remove_missing_is_noop():
    tree = make_tree([5, 3, 8])
    tree.remove(42)
    assert list(tree) == [3, 5, 8]
    assert len(tree) == 3


def test_remove_until_empty():
    values = [5, 3, 8, 1, 4, 7, 9]
    tree = make_tree(values)
    for value in values:
        tree.remove(value)
    assert tree.is_empty()
    assert len(tree) == 0
    assert tree.depth() == 0


def test_random_inserts_and_removes_keep_order():
    rng = random.Random(1234)
    reference = set()
    tree = BSTree(int_cmp, str)
    for _ in range(2000):
        value = rng.randrange(200)
        if rng.random() < 0.6:
            tree.insert(value)
            reference.add(value)
        else:
            tree.remove(value)
            reference.discard(value)
        assert len(tree) == len(reference)
    assert list(tree) == sorted(reference)
    if reference:
        assert tree.find_min() == min(reference)
        assert tree.find_max() == max(reference)


def test_custom_comparator_reverses_order():
    tree = BSTree(lambda a, b: int_cmp(b, a), str)
    for value in [3, 1, 2]:
        tree.insert(value)
    assert list(tree) == [3, 2, 1]
    assert tree.find_min() == 3