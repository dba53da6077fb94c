import math

import pytest

from avlmap import app as app_module
from avlmap.indexing import AVLTreeMap


def _walk(node, low, high):
    """Check order, stored height and balance below node; return (height, count)."""
    if node is None:
        return 0, 0
    key = node.get_key()
    assert low is None or low < key, f"{key!r} breaks BST order"
    assert high is None or key < high, f"{key!r} breaks BST order"
    h_left, n_left = _walk(node.get_left(), low, key)
    h_right, n_right = _walk(node.get_right(), key, high)
    assert node.get_height() == 1 + max(h_left, h_right), f"stale height at {key!r}"
    assert h_right - h_left in (-1, 0, 1), f"unbalanced at {key!r}"
    return node.get_height(), n_left + n_right + 1


def _check(tree: AVLTreeMap):
    h, count = _walk(tree._root, None, None)
    assert count == len(tree)
    assert h == tree.height()
    assert h <= math.ceil(1.44 * math.log2(len(tree) + 2))


def _shape(node):
    if node is None:
        return None
    return (node.get_key(), node.get_value(), node.get_height(),
            _shape(node.get_left()), _shape(node.get_right()))


@pytest.fixture
def check_invariants():
    return _check


@pytest.fixture
def shape():
    return lambda tree: _shape(tree._root)


@pytest.fixture
def tree():
    return AVLTreeMap()


@pytest.fixture
def client():
    app_module.tree.clear()
    app_module.STATE["key_type"] = "int"
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c
    app_module.tree.clear()
