"""High-level API for walkerlib.

This module provides simple, functional interfaces for common walks.
These functions wrap the Walker class for ease of use in one-shot cases.
"""

from itertools import islice
from typing import Any, Callable, Iterable, Iterator, List, Optional, Union

from .._common.config import SuccessorFunction, Tracker, TraversalStrategy
from .._common.validation import build_config
from .core.walker import Walker


def create(successors: SuccessorFunction,
           dedupe: bool = False,
           tracker: Optional[Tracker] = None) -> Walker:
    """Create a walker.

    Args:
        successors: Function returning the successors of a node
        dedupe: Visit each node at most once over the walker's lifetime
        tracker: Custom tracker deciding which discovered nodes to visit

    Returns:
        A tree walker by default, a graph walker when dedupe is True,
        or a custom walker when a tracker is given

    Raises:
        WalkerConfigError: If successors or tracker is not callable, or
            both dedupe and tracker are given

    Example:
        >>> walker = create(lambda n: [2 * n, 2 * n + 1])
        >>> list(islice(walker.breadth_first(1), 7))
        [1, 2, 3, 4, 5, 6, 7]
    """
    return Walker(build_config(successors, dedupe=dedupe, tracker=tracker))


def traverse(roots: Iterable[Any],
             successors: SuccessorFunction,
             strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
             dedupe: bool = False,
             tracker: Optional[Tracker] = None,
             max_nodes: Optional[int] = None) -> Iterator[Any]:
    """Simple interface for a one-shot walk.

    Args:
        roots: Initial nodes
        successors: Function returning the successors of a node
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post)
        dedupe: Skip nodes already visited during this walk
        tracker: Custom tracker (mutually exclusive with dedupe)
        max_nodes: Stop after this many nodes (None = unlimited)

    Yields:
        Nodes in the requested order

    Raises:
        ValueError: If max_nodes is negative or the strategy is unknown
    """
    if max_nodes is not None and max_nodes < 0:
        raise ValueError("max_nodes cannot be negative")

    nodes = create(successors, dedupe=dedupe, tracker=tracker).traverse_from(strategy, roots)
    if max_nodes is not None:
        return islice(nodes, max_nodes)
    return nodes


def find_nodes(roots: Iterable[Any],
               successors: SuccessorFunction,
               predicate: Callable[[Any], bool],
               strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
               dedupe: bool = False) -> Iterator[Any]:
    """Lazily find nodes matching a predicate.

    Unlike a tracker, the predicate does not prune: the successors of
    non-matching nodes are still walked.

    Example:
        >>> evens = find_nodes([1], lambda n: [n + 1], lambda n: n % 2 == 0)
        >>> next(evens)
        2
    """
    return (node for node in traverse(roots, successors, strategy, dedupe=dedupe)
            if predicate(node))


def count_nodes(roots: Iterable[Any],
                successors: SuccessorFunction,
                dedupe: bool = False) -> int:
    """Count the nodes reachable from roots.

    Never returns for infinite structures, or for cyclic ones without
    dedupe.
    """
    return sum(1 for _ in traverse(roots, successors, dedupe=dedupe))


def get_leaf_nodes(roots: Iterable[Any],
                   successors: SuccessorFunction,
                   dedupe: bool = False) -> List[Any]:
    """Collect the nodes that have no successors.

    A node is a leaf when its successor function returns None or an empty
    iterable. In dedupe mode a node whose successors were all visited
    earlier is not a leaf.
    """
    leaves = []

    def _recording(node: Any) -> Optional[Iterable[Any]]:
        found = successors(node)
        if found is None:
            leaves.append(node)
            return None
        found = list(found)
        if not found:
            leaves.append(node)
        return found

    for _ in traverse(roots, _recording, dedupe=dedupe):
        pass
    return leaves
