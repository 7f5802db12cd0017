"""Async walker.

AsyncWalker has the same constructors and ordering methods as Walker,
but every walk is an async iterator, so successor functions and trackers
may be coroutines:

    async def fetch_links(url):
        async with session.get(url) as response:
            return parse_links(await response.text())

    walker = AsyncWalker.graph(fetch_links)
    async for url in walker.breadth_first(start_url):
        ...

Roots are still checked when the walk is created, before the first await.
"""

from typing import Any, AsyncIterator, Iterable, Union

from ..._common.config import TraversalStrategy
from ...sync.core.walker import Walker
from .traversal import AsyncTraversal


class AsyncWalker(Walker):
    """Walker whose walks are async iterators.

    A graph-mode AsyncWalker shares its tracker between all walks, so
    several tasks can explore one graph cooperatively. Use a
    ConcurrentSetTracker if walks also run on other threads.
    """

    __slots__ = ()

    _session_class = AsyncTraversal

    def pre_order(self, *roots: Any) -> AsyncIterator[Any]:
        """Async pre-order walk from roots."""
        return self.pre_order_from(roots)

    def pre_order_from(self, roots: Iterable[Any]) -> AsyncIterator[Any]:
        return self._walk(TraversalStrategy.DEPTH_FIRST_PRE, roots)

    def post_order(self, *roots: Any) -> AsyncIterator[Any]:
        """Async post-order walk from roots."""
        return self.post_order_from(roots)

    def post_order_from(self, roots: Iterable[Any]) -> AsyncIterator[Any]:
        return self._walk(TraversalStrategy.DEPTH_FIRST_POST, roots)

    def breadth_first(self, *roots: Any) -> AsyncIterator[Any]:
        """Async breadth-first walk from roots."""
        return self.breadth_first_from(roots)

    def breadth_first_from(self, roots: Iterable[Any]) -> AsyncIterator[Any]:
        return self._walk(TraversalStrategy.BREADTH_FIRST, roots)

    def traverse(self, strategy: Union[TraversalStrategy, str], *roots: Any) -> AsyncIterator[Any]:
        return self.traverse_from(strategy, roots)
