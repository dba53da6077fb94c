from typing import Any, Iterable, Iterator, Optional, Tuple

from avlmap.balance import height, rebalance, recompute_height
from avlmap.base import OrderedMap
from avlmap.node import AVLNode


class AVLTreeMap(OrderedMap):
    """Map implementation using a self-balancing binary search tree (AVL)."""

    def __init__(self):
        self._root: Optional[AVLNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Generate an iteration of the map's keys in order."""
        for node in self._subtree_inorder(self._root):
            yield node.get_key()

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        return height(self._root)

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # ------------------ Lookup ------------------
    def _find_node(self, k: Any) -> Optional[AVLNode]:
        """Return the node holding key k, or None."""
        walk = self._root
        while walk is not None:
            key = walk.get_key()
            if k == key:
                return walk
            elif k < key:
                walk = walk.get_left()
            else:
                walk = walk.get_right()
        return None

    def get(self, k: Any) -> Optional[Any]:
        """Return the value associated with key k, or None."""
        node = self._find_node(k)
        if node is None:
            return None
        return node.get_value()

    def contains_key(self, k: Any) -> bool:
        return self._find_node(k) is not None

    # ------------------ Insert ------------------
    def insert(self, k: Any, v: Any) -> Optional[Any]:
        """Insert or replace entry (k, v) and return old value, or None."""
        self._root, old_value, created = self._subtree_insert(self._root, k, v)
        if created:
            self._size += 1
        return old_value

    def _subtree_insert(self, node: Optional[AVLNode], k: Any, v: Any) -> Tuple[AVLNode, Optional[Any], bool]:
        """
        Insert (k, v) below node.

        Returns the new subtree root, the replaced value (or None) and whether
        a new node was created. Every node on the descent path is rebalanced
        as the recursion unwinds.
        """
        if node is None:
            return AVLNode(k, v), None, True

        key = node.get_key()
        if k == key:
            old_value = node.get_value()
            node.set_value(v)
            return rebalance(node), old_value, False
        elif k < key:
            child, old_value, created = self._subtree_insert(node.get_left(), k, v)
            node.set_left(child)
        else:
            child, old_value, created = self._subtree_insert(node.get_right(), k, v)
            node.set_right(child)
        return rebalance(node), old_value, created

    # ------------------ Delete ------------------
    def remove(self, k: Any) -> Optional[Any]:
        """Remove entry with key k and return its value, or None."""
        self._root, removed = self._subtree_remove(self._root, k)
        if removed is None:
            return None
        self._size -= 1
        return removed.get_value()

    def _subtree_remove(self, node: Optional[AVLNode], k: Any) -> Tuple[Optional[AVLNode], Optional[AVLNode]]:
        """
        Remove key k from the subtree rooted at node.

        Returns the new subtree root and the detached node (or None when k is
        absent, in which case no node is restructured).
        """
        if node is None:
            return None, None

        key = node.get_key()
        if k < key:
            child, removed = self._subtree_remove(node.get_left(), k)
            if removed is None:
                return node, None
            node.set_left(child)
            return rebalance(node), removed
        elif key < k:
            child, removed = self._subtree_remove(node.get_right(), k)
            if removed is None:
                return node, None
            node.set_right(child)
            return rebalance(node), removed

        left, right = node.get_left(), node.get_right()
        if left is None:
            replacement = right
        elif right is None:
            replacement = left
        else:
            # splice the in-order successor into this position
            rest, replacement = self._take_min(right)
            replacement.set_left(left)
            replacement.set_right(rest)
            recompute_height(replacement)

        node.set_left(None)
        node.set_right(None)
        return rebalance(replacement), node

    def _take_min(self, node: AVLNode) -> Tuple[Optional[AVLNode], AVLNode]:
        """Detach the minimum node of a non-empty subtree; return (rest, minimum)."""
        left = node.get_left()
        if left is None:
            rest = node.get_right()
            node.set_right(None)
            return rest, node
        rest, minimum = self._take_min(left)
        node.set_left(rest)
        return rebalance(node), minimum

    # ------------------ Ordered iteration ------------------
    def _subtree_inorder(self, node: Optional[AVLNode]) -> Iterable[AVLNode]:
        """Generate the nodes of the subtree in key order, keeping a stack of pending ancestors."""
        stack = []
        walk = node
        while stack or walk is not None:
            while walk is not None:
                stack.append(walk)
                walk = walk.get_left()
            walk = stack.pop()
            yield walk
            walk = walk.get_right()

    def iter(self) -> Iterator[Tuple[Any, Any]]:
        """Return a fresh iterator of (key, value) pairs in ascending key order."""
        return ((n.get_key(), n.get_value()) for n in self._subtree_inorder(self._root))
