"""The horizon: cursors a traversal session still has to drain.

Each cursor is a lazy iterator over one set of sibling nodes (the roots,
or the successors of one visited node). The session always works on the
cursor at the front of the horizon; the insertion order decides whether
new cursors go in front of it (stack) or behind everything (queue).

The horizon does not care whether cursors are sync or async iterators,
so both walker implementations share it.
"""

from collections import deque
from typing import Any, Deque

from .config import InsertionOrder


class Horizon:
    """Ordered collection of sibling cursors for one traversal session."""

    __slots__ = ('_cursors', '_insert')

    def __init__(self, order: InsertionOrder):
        self._cursors: Deque[Any] = deque()
        if order is InsertionOrder.PUSH_TOP:
            self._insert = self._cursors.appendleft
        else:
            self._insert = self._cursors.append

    def insert(self, cursor: Any) -> None:
        """Add a cursor according to the horizon's insertion order."""
        self._insert(cursor)

    @property
    def top(self) -> Any:
        """The cursor currently being drained."""
        return self._cursors[0]

    def pop(self) -> Any:
        """Remove and return the cursor being drained."""
        return self._cursors.popleft()

    def __bool__(self) -> bool:
        return bool(self._cursors)

    def __len__(self) -> int:
        return len(self._cursors)
