"""Core async walker components."""

from .walker import AsyncWalker
from .traversal import AsyncTraversal

__all__ = [
    'AsyncWalker',
    'AsyncTraversal',
]
