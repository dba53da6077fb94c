"""In-memory ordered map backed by an AVL tree."""

from .base import OrderedMap
from .node import AVLNode
from .indexing import AVLTreeMap

__all__ = ["OrderedMap", "AVLNode", "AVLTreeMap"]
