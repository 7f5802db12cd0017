"""Traversal sessions for the synchronous walker.

A session is created for every call to one of the Walker's ordering
methods. It owns one horizon of cursors (plus, for post-order, a stack of
parents waiting for their subtrees) and drives it one step per pull.
Nothing runs until the consumer asks for the next node.
"""

import logging
from typing import Any, Iterator, List, Sequence

from ..._common.config import (
    InsertionOrder,
    TraversalStrategy,
    WalkerConfig,
    insertion_order_for,
)
from ..._common.horizon import Horizon

logger = logging.getLogger(__name__)

# Returned by _visit_next when the cursor has no acceptable node left.
_EXHAUSTED = object()


class Traversal:
    """One single-pass walk over the nodes reachable from some roots.

    Not safe to pull from more than one thread. Once the successor function
    or the tracker raises, the iterator is finished and must not be reused.
    """

    def __init__(self, config: WalkerConfig, strategy: TraversalStrategy):
        self._successors = config.successors
        self._tracker = config.tracker
        self.strategy = strategy
        self.emitted = 0

    def walk(self, roots: Sequence[Any]) -> Iterator[Any]:
        """Return the lazy iterator of nodes for this session's strategy."""
        logger.debug("Starting %s walk from %d root(s)", self.strategy.value, len(roots))
        if self.strategy is TraversalStrategy.DEPTH_FIRST_POST:
            return self._bottom_up(roots)
        return self._top_down(roots, insertion_order_for(self.strategy))

    def _top_down(self, roots: Sequence[Any], order: InsertionOrder) -> Iterator[Any]:
        """Pre-order (stack) or breadth-first (queue) walk.

        Nodes are yielded as soon as they are accepted; their successor
        cursor is inserted into the horizon first, so the insertion order
        alone decides between depth-first and breadth-first.
        """
        horizon = Horizon(order)
        horizon.insert(iter(roots))

        while horizon:
            node = self._visit_next(horizon.top)
            if node is _EXHAUSTED:
                horizon.pop()
                continue

            successors = self._successors(node)
            if successors is not None:
                horizon.insert(iter(successors))
            self.emitted += 1
            yield node

        logger.debug("%s walk exhausted after %d node(s)", self.strategy.value, self.emitted)

    def _bottom_up(self, roots: Sequence[Any]) -> Iterator[Any]:
        """Post-order walk.

        A node with successors is parked on the pending stack while its
        cursor is drained; it is yielded when that cursor runs out, which
        is the first moment all its accepted descendants have been yielded.
        Nodes whose successor function returns None are leaves and are
        yielded immediately.
        """
        horizon = Horizon(InsertionOrder.PUSH_TOP)
        horizon.insert(iter(roots))
        pending: List[Any] = []

        while horizon:
            node = self._visit_next(horizon.top)
            if node is _EXHAUSTED:
                horizon.pop()
                if pending:
                    self.emitted += 1
                    yield pending.pop()
                continue

            successors = self._successors(node)
            if successors is None:
                self.emitted += 1
                yield node
            else:
                horizon.insert(iter(successors))
                pending.append(node)

        logger.debug("%s walk exhausted after %d node(s)", self.strategy.value, self.emitted)

    def _visit_next(self, cursor: Iterator[Any]) -> Any:
        """Advance cursor to the next node the tracker accepts.

        None entries are skipped without consulting the tracker.
        """
        for candidate in cursor:
            if candidate is not None and self._tracker(candidate):
                return candidate
        return _EXHAUSTED
