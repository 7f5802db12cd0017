"""The Walker: lazy pre-order, post-order and breadth-first walks.

A Walker pairs a successor function with a tracker. It never stores the
structure it walks: each walk asks the successor function for the
successors of a node only when the consumer pulls past that node, so
infinite trees and graphs can be walked as long as the consumer stops.

Example:
    >>> children = {'A': ['B', 'C'], 'B': ['D']}
    >>> walker = Walker.tree(lambda node: children.get(node))
    >>> list(walker.pre_order('A'))
    ['A', 'B', 'D', 'C']
"""

import logging
from typing import Any, Callable, Hashable, Iterable, Iterator, Optional, Union

from ..._common.config import (
    SuccessorFunction,
    Tracker,
    TrackingMode,
    TraversalStrategy,
    WalkerConfig,
    parse_strategy,
)
from ..._common.tracking import SetTracker, always_track
from ..._common.validation import require_roots
from .traversal import Traversal

logger = logging.getLogger(__name__)


class Walker:
    """Immutable walk configuration that spawns lazy traversal sessions.

    Every ordering method validates its roots immediately and returns a
    fresh single-pass iterator. The walker itself may be reused for any
    number of walks; in graph mode all of them share one tracker, so a
    node visited by one walk is skipped by every later (or concurrent) one.
    Create a new walker to start clean.
    """

    __slots__ = ('_config',)

    _session_class = Traversal

    def __init__(self, config: WalkerConfig):
        """Create a walker from a configuration.

        Args:
            config: Successor function, tracker and tracking mode

        Raises:
            WalkerConfigError: If the configuration is invalid
        """
        self._config = config.require_valid()
        logger.debug("Created %s walker", config.mode.value)

    @classmethod
    def tree(cls, get_children: SuccessorFunction) -> 'Walker':
        """Walker for structures without cycles.

        No node tracking is done. WARNING: walks never terminate if
        get_children actually describes a cyclic graph (for example any
        undirected graph).

        Args:
            get_children: Returns the children of a node; None or an empty
                iterable means the node has no children
        """
        return cls(WalkerConfig(get_children, always_track, TrackingMode.TREE))

    @classmethod
    def graph(cls,
              find_successors: SuccessorFunction,
              key: Optional[Callable[[Any], Hashable]] = None) -> 'Walker':
        """Walker for graphs that may contain cycles.

        The walker remembers every node it has visited, across all walks
        it spawns, and skips them afterwards. This lets several walks
        explore one graph cooperatively from different entry points:

            walker = Walker.graph(building_map)
            shield = walker.pre_order(roof)
            avengers = walker.breadth_first(main_entrance)
            # no room is raided twice

        Memory use grows linearly with the number of visited nodes.

        Args:
            find_successors: Returns the successors of a node; None or an
                empty iterable means the node has no successors
            key: Optional function mapping a node to the hashable identity
                used for deduplication
        """
        return cls(WalkerConfig(find_successors, SetTracker(key), TrackingMode.GRAPH))

    @classmethod
    def custom(cls, find_successors: SuccessorFunction, tracker: Tracker) -> 'Walker':
        """Walker with a caller-supplied tracker.

        tracker(node) is called whenever a node is discovered; the node is
        skipped, and its successors never requested, if it returns False.
        Use a ConcurrentSetTracker when walks from several threads share
        this walker.
        """
        return cls(WalkerConfig(find_successors, tracker, TrackingMode.CUSTOM))

    @property
    def config(self) -> WalkerConfig:
        return self._config

    @property
    def mode(self) -> TrackingMode:
        return self._config.mode

    @property
    def tracker(self) -> Tracker:
        return self._config.tracker

    def pre_order(self, *roots: Any) -> Iterator[Any]:
        """Walk depth-first from roots, yielding parents before children.

        The iterator may be infinite if the structure has infinite depth or
        breadth; it can always be abandoned after any number of nodes.
        """
        return self.pre_order_from(roots)

    def pre_order_from(self, roots: Iterable[Any]) -> Iterator[Any]:
        """Same as pre_order, taking the roots as one collection."""
        return self._walk(TraversalStrategy.DEPTH_FIRST_PRE, roots)

    def post_order(self, *roots: Any) -> Iterator[Any]:
        """Walk depth-first from roots, yielding children before parents.

        The iterator may be infinite if the structure has infinite breadth.
        A branch of infinite depth is never finished, so the walk keeps
        descending without yielding its ancestors.
        """
        return self.post_order_from(roots)

    def post_order_from(self, roots: Iterable[Any]) -> Iterator[Any]:
        """Same as post_order, taking the roots as one collection."""
        return self._walk(TraversalStrategy.DEPTH_FIRST_POST, roots)

    def breadth_first(self, *roots: Any) -> Iterator[Any]:
        """Walk level by level from roots.

        The iterator may be infinite if the structure has infinite depth or
        breadth. Memory use grows with the width of the structure.
        """
        return self.breadth_first_from(roots)

    def breadth_first_from(self, roots: Iterable[Any]) -> Iterator[Any]:
        """Same as breadth_first, taking the roots as one collection."""
        return self._walk(TraversalStrategy.BREADTH_FIRST, roots)

    def traverse(self, strategy: Union[TraversalStrategy, str], *roots: Any) -> Iterator[Any]:
        """Walk from roots using a strategy given by enum or name (bfs, dfs_pre, dfs_post)."""
        return self.traverse_from(strategy, roots)

    def traverse_from(self,
                      strategy: Union[TraversalStrategy, str],
                      roots: Iterable[Any]) -> Iterator[Any]:
        """Same as traverse, taking the roots as one collection."""
        return self._walk(parse_strategy(strategy), roots)

    def _walk(self, strategy: TraversalStrategy, roots: Iterable[Any]) -> Iterator[Any]:
        nodes = require_roots(roots)
        return self._session_class(self._config, strategy).walk(nodes)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(mode={self._config.mode.value})"
