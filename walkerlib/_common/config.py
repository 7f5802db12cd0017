"""Configuration system for walkerlib.

This module defines how a walker is configured: which successor function
finds the next nodes, which tracker decides whether a discovered node is
visited, and which traversal strategy a session runs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Union

from .errors import WalkerConfigError


SuccessorFunction = Callable[[Any], Optional[Iterable[Any]]]
Tracker = Callable[[Any], bool]


class TraversalStrategy(Enum):
    """Order in which a walk visits nodes."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent


class TrackingMode(Enum):
    """How a walker decides whether a discovered node is visited."""
    TREE = "tree"        # Every node is visited, no bookkeeping
    GRAPH = "graph"      # Each node visited once over the walker's lifetime
    CUSTOM = "custom"    # Caller-supplied tracker


class InsertionOrder(Enum):
    """Where a new successor cursor goes in the horizon.

    PUSH_TOP makes the horizon a stack (depth-first orders),
    APPEND_BACK makes it a queue (breadth-first).
    """
    PUSH_TOP = "push_top"
    APPEND_BACK = "append_back"


_STRATEGY_ALIASES = {
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'level': TraversalStrategy.BREADTH_FIRST,
    'level_order': TraversalStrategy.BREADTH_FIRST,
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'pre_order': TraversalStrategy.DEPTH_FIRST_PRE,
    'preorder': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
    'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
    'post_order': TraversalStrategy.DEPTH_FIRST_POST,
    'postorder': TraversalStrategy.DEPTH_FIRST_POST,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Resolve a strategy given as an enum member or a name.

    Args:
        strategy: TraversalStrategy or one of its aliases (bfs, dfs_pre, ...)

    Returns:
        The matching TraversalStrategy

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = str(strategy).lower()
    if strategy_lower not in _STRATEGY_ALIASES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
        )
    return _STRATEGY_ALIASES[strategy_lower]


def insertion_order_for(strategy: TraversalStrategy) -> InsertionOrder:
    """Horizon discipline used by a top-down strategy."""
    if strategy is TraversalStrategy.BREADTH_FIRST:
        return InsertionOrder.APPEND_BACK
    return InsertionOrder.PUSH_TOP


@dataclass(frozen=True)
class WalkerConfig:
    """Immutable pairing of a successor function and a tracker.

    A walker is built from exactly one WalkerConfig and keeps it for its
    whole lifetime. When the tracker is stateful (GRAPH mode), its state
    belongs to this config and is shared by every session of the walker.
    """

    successors: SuccessorFunction
    tracker: Tracker
    mode: TrackingMode = TrackingMode.CUSTOM

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.successors is None:
            errors.append("successor function cannot be None")
        elif not callable(self.successors):
            errors.append("successor function must be callable")

        if self.tracker is None:
            errors.append("tracker cannot be None")
        elif not callable(self.tracker):
            errors.append("tracker must be callable")

        if not isinstance(self.mode, TrackingMode):
            errors.append(f"mode must be a TrackingMode, got {self.mode!r}")

        return errors

    def require_valid(self) -> 'WalkerConfig':
        """Return self, or raise WalkerConfigError listing every problem."""
        errors = self.validate()
        if errors:
            raise WalkerConfigError(f"Invalid walker configuration: {'; '.join(errors)}")
        return self
