"""Async traversal sessions.

Same horizon algorithms as the synchronous walker, with every cursor
advance, successor lookup and tracker test awaited when it needs to be.
Cursors may be plain iterators or async iterators, mixed freely.
"""

import inspect
import logging
from typing import Any, AsyncIterator, List, Optional, Sequence

from ..._common.config import (
    InsertionOrder,
    TraversalStrategy,
    WalkerConfig,
    insertion_order_for,
)
from ..._common.horizon import Horizon

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


async def _advance(cursor: Any) -> Any:
    """Next element of a sync or async cursor, or _EXHAUSTED."""
    if hasattr(cursor, '__anext__'):
        try:
            return await cursor.__anext__()
        except StopAsyncIteration:
            return _EXHAUSTED
    return next(cursor, _EXHAUSTED)


class AsyncTraversal:
    """One single-pass async walk over the nodes reachable from some roots.

    Must be consumed by a single task.
    """

    def __init__(self, config: WalkerConfig, strategy: TraversalStrategy):
        self._successors = config.successors
        self._tracker = config.tracker
        self.strategy = strategy
        self.emitted = 0

    def walk(self, roots: Sequence[Any]) -> AsyncIterator[Any]:
        """Return the async iterator of nodes for this session's strategy."""
        logger.debug("Starting async %s walk from %d root(s)", self.strategy.value, len(roots))
        if self.strategy is TraversalStrategy.DEPTH_FIRST_POST:
            return self._bottom_up(roots)
        return self._top_down(roots, insertion_order_for(self.strategy))

    async def _top_down(self, roots: Sequence[Any], order: InsertionOrder) -> AsyncIterator[Any]:
        horizon = Horizon(order)
        horizon.insert(iter(roots))

        while horizon:
            node = await self._visit_next(horizon.top)
            if node is _EXHAUSTED:
                horizon.pop()
                continue

            successors = await self._find_successors(node)
            if successors is not None:
                horizon.insert(successors)
            self.emitted += 1
            yield node

        logger.debug("Async %s walk exhausted after %d node(s)", self.strategy.value, self.emitted)

    async def _bottom_up(self, roots: Sequence[Any]) -> AsyncIterator[Any]:
        horizon = Horizon(InsertionOrder.PUSH_TOP)
        horizon.insert(iter(roots))
        pending: List[Any] = []

        while horizon:
            node = await self._visit_next(horizon.top)
            if node is _EXHAUSTED:
                horizon.pop()
                if pending:
                    self.emitted += 1
                    yield pending.pop()
                continue

            successors = await self._find_successors(node)
            if successors is None:
                self.emitted += 1
                yield node
            else:
                horizon.insert(successors)
                pending.append(node)

        logger.debug("Async %s walk exhausted after %d node(s)", self.strategy.value, self.emitted)

    async def _find_successors(self, node: Any) -> Optional[Any]:
        """Cursor over the successors of node, or None for a leaf.

        The successor function may be sync or async and may return None,
        an iterable or an async iterable.
        """
        found = self._successors(node)
        if inspect.isawaitable(found):
            found = await found
        if found is None:
            return None
        if hasattr(found, '__aiter__'):
            return found.__aiter__()
        return iter(found)

    async def _visit_next(self, cursor: Any) -> Any:
        while True:
            candidate = await _advance(cursor)
            if candidate is _EXHAUSTED:
                return _EXHAUSTED
            if candidate is None:
                continue

            accepted = self._tracker(candidate)
            if inspect.isawaitable(accepted):
                accepted = await accepted
            if accepted:
                return candidate
