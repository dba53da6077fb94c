"""
AVL balancing engine.

All functions operate on a subtree given by its root node, with None standing
for the empty tree. Functions that can change which node sits at the top of a
subtree return the new root; callers store it back into the slot they read
the subtree from.
"""

from typing import Optional

from avlmap.node import AVLNode


def height(node: Optional[AVLNode]) -> int:
    """Return the stored height of node (or 0 if None)."""
    if node is None:
        return 0
    return node.get_height()


def balance_factor(node: Optional[AVLNode]) -> int:
    """
    Return height(right) - height(left) for node (or 0 if None).

    Negative values lean left, positive values lean right. A magnitude of 2
    means the AVL property was just broken at this node.
    """
    if node is None:
        return 0
    return height(node.get_right()) - height(node.get_left())


def recompute_height(node: Optional[AVLNode]) -> None:
    """Update node's height from its children, which must already be correct."""
    if node is None:
        return
    node.set_height(1 + max(height(node.get_left()), height(node.get_right())))


def full_recompute_height(node: Optional[AVLNode]) -> int:
    """Recompute the height of every node in the subtree and return the root's."""
    if node is None:
        return 0
    h_left = full_recompute_height(node.get_left())
    h_right = full_recompute_height(node.get_right())
    node.set_height(1 + max(h_left, h_right))
    return node.get_height()


def rotate_right(node: Optional[AVLNode]) -> AVLNode:
    """Promote node's left child to the root of the subtree and return it."""
    if node is None or node.get_left() is None:
        raise RuntimeError("rotate_right requires a node with a left child")
    pivot = node.get_left()
    node.set_left(pivot.get_right())
    pivot.set_right(node)

    # node now sits below pivot, so it is recomputed first
    recompute_height(node)
    recompute_height(pivot)
    return pivot


def rotate_left(node: Optional[AVLNode]) -> AVLNode:
    """Promote node's right child to the root of the subtree and return it."""
    if node is None or node.get_right() is None:
        raise RuntimeError("rotate_left requires a node with a right child")
    pivot = node.get_right()
    node.set_right(pivot.get_left())
    pivot.set_left(node)

    recompute_height(node)
    recompute_height(pivot)
    return pivot


def rotate_left_right(node: AVLNode) -> AVLNode:
    """Double rotation for a left-heavy node whose left child leans right."""
    node.set_left(rotate_left(node.get_left()))
    return rotate_right(node)


def rotate_right_left(node: AVLNode) -> AVLNode:
    """Double rotation for a right-heavy node whose right child leans left."""
    node.set_right(rotate_right(node.get_right()))
    return rotate_left(node)


def rebalance(node: Optional[AVLNode]) -> Optional[AVLNode]:
    """
    Restore the AVL property at node after a one-level height change below it.

    Both children must already carry correct heights. The single rotation is
    chosen whenever the taller child is balanced or leans the same way; the
    double rotation only when it leans the opposite way. Returns the root of
    the (possibly restructured) subtree with its height brought up to date.
    """
    if node is None:
        return None

    balance = balance_factor(node)
    if balance == -2:
        if balance_factor(node.get_left()) <= 0:
            node = rotate_right(node)
        else:
            node = rotate_left_right(node)
    elif balance == 2:
        if balance_factor(node.get_right()) >= 0:
            node = rotate_left(node)
        else:
            node = rotate_right_left(node)

    recompute_height(node)
    return node
