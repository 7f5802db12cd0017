"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration classes (WalkerConfig, TraversalStrategy)
- Trackers (always_track, SetTracker, ConcurrentSetTracker)
- The horizon of sibling cursors
- Exceptions and precondition checks

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import (
    WalkerConfig,
    TraversalStrategy,
    TrackingMode,
    InsertionOrder,
    SuccessorFunction,
    Tracker,
    parse_strategy,
    insertion_order_for,
)
from .errors import WalkerError, WalkerConfigError, NullNodeError
from .tracking import always_track, SetTracker, ConcurrentSetTracker
from .horizon import Horizon
from .validation import require_roots, build_config

__all__ = [
    'WalkerConfig',
    'TraversalStrategy',
    'TrackingMode',
    'InsertionOrder',
    'SuccessorFunction',
    'Tracker',
    'parse_strategy',
    'insertion_order_for',
    'WalkerError',
    'WalkerConfigError',
    'NullNodeError',
    'always_track',
    'SetTracker',
    'ConcurrentSetTracker',
    'Horizon',
    'require_roots',
    'build_config',
]
