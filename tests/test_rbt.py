import random

import pytest

from treelab.rbt import RBT, Color, RBTNode


def _check(tree):
    """Assert the red-black invariants and return the black height."""
    nil = tree.sentinel
    assert nil.color is Color.BLACK
    if tree.root is nil:
        return 0
    assert tree.root.color is Color.BLACK
    assert tree.root.parent is nil

    def walk(node):
        if node is nil:
            return 1
        for child in (node.left, node.right):
            if child is not nil:
                assert child.parent is node
        if node.left is not nil:
            assert node.left.key <= node.key
        if node.right is not nil:
            assert node.right.key >= node.key
        if node.color is Color.RED:
            assert node.left.color is Color.BLACK
            assert node.right.color is Color.BLACK
        left = walk(node.left)
        right = walk(node.right)
        assert left == right
        return left + (node.color is Color.BLACK)

    return walk(tree.root)


def _build(keys):
    tree = RBT()
    nodes = []
    for key in keys:
        node = RBTNode(key)
        tree.insert(node)
        nodes.append(node)
    return tree, nodes


def test_node_describe_uses_colour_name():
    assert RBTNode(5, Color.RED).describe() == "5 Red"
    assert RBTNode(7).describe() == "7 Black"


def test_three_ascending_inserts_balance():
    tree, _ = _build([1, 2, 3])
    assert tree.walk() == "1 Red\n2 Black\n3 Red\n"
    assert tree.root.key == 2


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_random_inserts_keep_invariants(seed):
    rng = random.Random(seed)
    keys = [rng.randrange(100) for _ in range(60)]
    tree, _ = _build(keys)
    _check(tree)
    assert [node.key for node in tree] == sorted(keys)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_random_deletes_keep_invariants(seed):
    rng = random.Random(seed)
    keys = [rng.randrange(100) for _ in range(60)]
    tree, nodes = _build(keys)
    remaining = list(keys)
    order = list(nodes)
    rng.shuffle(order)
    for node in order[:45]:
        remaining.remove(node.key)
        tree.delete(node)
        _check(tree)
        assert [n.key for n in tree] == sorted(remaining)


def test_delete_everything_empties_tree():
    tree, nodes = _build([15, 10, 20, 8, 12, 16, 25])
    for node in nodes:
        tree.delete(node)
    assert tree.root is tree.sentinel
    assert tree.minimum() is None
    assert tree.walk() == ""


def test_search_min_max_succ_pred():
    keys = [15, 10, 20, 8, 12, 16, 25]
    tree, nodes = _build(keys)
    assert tree.minimum().key == min(keys)
    assert tree.maximum().key == max(keys)
    assert tree.search(12).key == 12
    assert tree.search(13) is None
    by_key = {n.key: n for n in nodes}
    assert tree.successor(by_key[12]).key == 15
    assert tree.predecessor(by_key[16]).key == 15
    assert tree.successor(by_key[25]) is None
    assert tree.predecessor(by_key[8]) is None


def test_search_then_delete_key():
    tree, _ = _build([5, 3, 8, 3, 9])
    tree.delete(tree.search(8))
    assert tree.search(8) is None
    assert [n.key for n in tree] == [3, 3, 5, 9]
    _check(tree)


def test_rotations_preserve_order_and_are_inverse():
    tree, _ = _build(range(10))
    before = [n.key for n in tree]
    root = tree.root
    right_child = root.right
    tree.left_rotate(root)
    assert tree.root is right_child
    assert right_child.left is root
    assert [n.key for n in tree] == before
    tree.right_rotate(right_child)
    assert tree.root is root
    assert [n.key for n in tree] == before


def test_rotate_without_child_raises():
    tree, nodes = _build([1])
    with pytest.raises(ValueError):
        tree.left_rotate(nodes[0])
    with pytest.raises(ValueError):
        tree.right_rotate(nodes[0])


def test_delete_none_is_ignored():
    tree, _ = _build([4, 2, 6])
    tree.delete(None)
    assert [n.key for n in tree] == [2, 4, 6]