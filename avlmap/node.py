from typing import Any, Optional


class AVLNode:
    """Tree node storing a key, its value, the subtree height and two children."""
    __slots__ = '_key', '_value', '_height', '_left', '_right'

    def __init__(self, key, value, left=None, right=None):
        self._key = key
        self._value = value
        self._height = 1
        self._left = left
        self._right = right

    def get_key(self): return self._key
    def get_value(self): return self._value
    def get_height(self) -> int: return self._height
    def get_left(self) -> Optional['AVLNode']: return self._left
    def get_right(self) -> Optional['AVLNode']: return self._right
    def set_value(self, value: Any): self._value = value
    def set_height(self, height: int): self._height = height
    def set_left(self, left: Optional['AVLNode']): self._left = left
    def set_right(self, right: Optional['AVLNode']): self._right = right

    def num_children(self) -> int:
        """Return the number of non-empty child subtrees."""
        count = 0
        if self._left is not None:
            count += 1
        if self._right is not None:
            count += 1
        return count

    def __repr__(self):
        return f"AVLNode({self._key!r}, {self._value!r}, height={self._height})"
