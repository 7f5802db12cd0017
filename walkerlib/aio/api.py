"""High-level async API for walkerlib.

Async counterparts of walkerlib.sync.api for one-shot walks whose
successor function does I/O.
"""

from typing import Any, AsyncIterator, Iterable, List, Optional, Union

from .._common.config import SuccessorFunction, Tracker, TraversalStrategy
from .._common.validation import build_config
from .core.walker import AsyncWalker


def create_async(successors: SuccessorFunction,
                 dedupe: bool = False,
                 tracker: Optional[Tracker] = None) -> AsyncWalker:
    """Create an AsyncWalker (tree, graph or custom mode like sync.create)."""
    return AsyncWalker(build_config(successors, dedupe=dedupe, tracker=tracker))


def traverse_async(roots: Iterable[Any],
                   successors: SuccessorFunction,
                   strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
                   dedupe: bool = False,
                   tracker: Optional[Tracker] = None) -> AsyncIterator[Any]:
    """One-shot async walk.

    Not a coroutine: bad arguments raise here, before anything is awaited.

    Example:
        async for node in traverse_async([root], fetch_children, "bfs"):
            print(node)
    """
    walker = create_async(successors, dedupe=dedupe, tracker=tracker)
    return walker.traverse_from(strategy, roots)


async def collect_async(roots: Iterable[Any],
                        successors: SuccessorFunction,
                        strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
                        dedupe: bool = False,
                        tracker: Optional[Tracker] = None,
                        max_nodes: Optional[int] = None) -> List[Any]:
    """Walk and collect nodes into a list.

    Args:
        tracker: Custom tracker (mutually exclusive with dedupe)
        max_nodes: Stop after this many nodes (None = unlimited)
    """
    if max_nodes is not None and max_nodes < 0:
        raise ValueError("max_nodes cannot be negative")

    nodes = []
    if max_nodes == 0:
        return nodes
    async for node in traverse_async(roots, successors, strategy, dedupe=dedupe, tracker=tracker):
        nodes.append(node)
        if max_nodes is not None and len(nodes) >= max_nodes:
            break
    return nodes


async def count_nodes_async(roots: Iterable[Any],
                            successors: SuccessorFunction,
                            dedupe: bool = False) -> int:
    """Count the nodes reachable from roots."""
    count = 0
    async for _ in traverse_async(roots, successors, dedupe=dedupe):
        count += 1
    return count
