"""Precondition checks run when a walker or a session is created.

Everything here runs synchronously at the call that introduces the bad
value, never inside a lazy walk.
"""

from typing import Any, Iterable, Optional, Tuple

from .config import SuccessorFunction, Tracker, TrackingMode, WalkerConfig
from .errors import NullNodeError, WalkerConfigError
from .tracking import SetTracker, always_track


def require_roots(roots: Iterable[Any]) -> Tuple[Any, ...]:
    """Materialize the initial nodes of a walk, rejecting None.

    Args:
        roots: A fixed collection of initial nodes

    Returns:
        The nodes as a tuple, in their original order

    Raises:
        NullNodeError: If roots itself or any element is None
    """
    if roots is None:
        raise NullNodeError("initial nodes cannot be None")

    nodes = tuple(roots)
    for index, node in enumerate(nodes):
        if node is None:
            raise NullNodeError(f"initial node at position {index} is None")
    return nodes


def build_config(successors: SuccessorFunction,
                 dedupe: bool = False,
                 tracker: Optional[Tracker] = None) -> WalkerConfig:
    """Build a validated WalkerConfig from the create() arguments.

    Args:
        successors: Function returning the successors of a node
        dedupe: Use a fresh SetTracker so each node is visited once
        tracker: Custom tracker; mutually exclusive with dedupe

    Returns:
        WalkerConfig with the matching TrackingMode

    Raises:
        WalkerConfigError: If the arguments are inconsistent or invalid
    """
    if tracker is not None:
        if dedupe:
            raise WalkerConfigError("pass either dedupe=True or a tracker, not both")
        config = WalkerConfig(successors, tracker, TrackingMode.CUSTOM)
    elif dedupe:
        config = WalkerConfig(successors, SetTracker(), TrackingMode.GRAPH)
    else:
        config = WalkerConfig(successors, always_track, TrackingMode.TREE)
    return config.require_valid()
