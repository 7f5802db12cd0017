"""Core synchronous walker components."""

from .walker import Walker
from .traversal import Traversal

__all__ = [
    "Walker",
    "Traversal",
]
