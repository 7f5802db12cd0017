"""Node trackers for walkerlib.

A tracker is called once each time a node is discovered. Returning True
visits the node (it is yielded and its successors are requested);
returning False prunes it.
"""

import threading
from typing import Any, Callable, FrozenSet, Hashable, Optional, Set


def always_track(node: Any) -> bool:
    """Tracker for tree walks: visit every node, remember nothing."""
    return True


class SetTracker:
    """Claim-once tracker backed by a set.

    The first call for a node claims it and returns True; any later call
    for an equal node returns False. Memory use is linear in the number
    of claimed nodes.

    Nodes are compared by ``key(node)`` when a key function is given,
    which lets callers dedupe by an identifier instead of by value:

        tracker = SetTracker(key=lambda room: room.number)
    """

    def __init__(self, key: Optional[Callable[[Any], Hashable]] = None):
        self._key = key
        self._seen: Set[Hashable] = set()

    def _identity(self, node: Any) -> Hashable:
        return node if self._key is None else self._key(node)

    def __call__(self, node: Any) -> bool:
        identity = self._identity(node)
        if identity in self._seen:
            return False
        self._seen.add(identity)
        return True

    def __contains__(self, node: Any) -> bool:
        return self._identity(node) in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    @property
    def seen(self) -> FrozenSet[Hashable]:
        """Snapshot of the identities claimed so far."""
        return frozenset(self._seen)

    def clear(self) -> None:
        """Forget every claimed node."""
        self._seen.clear()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(claimed={len(self._seen)})"


class ConcurrentSetTracker(SetTracker):
    """SetTracker that can be shared by walks running on several threads.

    Check-and-claim happens under one lock, so two threads walking the
    same graph never both visit a node.
    """

    def __init__(self, key: Optional[Callable[[Any], Hashable]] = None):
        super().__init__(key)
        self._lock = threading.Lock()

    def __call__(self, node: Any) -> bool:
        identity = self._identity(node)
        with self._lock:
            if identity in self._seen:
                return False
            self._seen.add(identity)
            return True

    def __contains__(self, node: Any) -> bool:
        identity = self._identity(node)
        with self._lock:
            return identity in self._seen

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)

    @property
    def seen(self) -> FrozenSet[Hashable]:
        with self._lock:
            return frozenset(self._seen)

    def clear(self) -> None:
        with self._lock:
            self._seen.clear()
