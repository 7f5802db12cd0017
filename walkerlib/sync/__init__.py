"""Synchronous implementation of walkerlib.

Walks are plain Python iterators: every pull runs the successor function
and tracker in the caller's thread, and nothing runs between pulls.
"""

# Core components
from .core.walker import Walker
from .core.traversal import Traversal

# Configuration and tracking
from .config import (
    WalkerConfig,
    TraversalStrategy,
    TrackingMode,
    InsertionOrder,
    parse_strategy,
)
from .._common.tracking import always_track, SetTracker, ConcurrentSetTracker
from .._common.errors import WalkerError, WalkerConfigError, NullNodeError

# High-level API
from .api import (
    create,
    traverse,
    find_nodes,
    count_nodes,
    get_leaf_nodes,
)

__all__ = [
    # Core
    'Walker',
    'Traversal',
    # Config
    'WalkerConfig',
    'TraversalStrategy',
    'TrackingMode',
    'InsertionOrder',
    'parse_strategy',
    # Tracking
    'always_track',
    'SetTracker',
    'ConcurrentSetTracker',
    # Errors
    'WalkerError',
    'WalkerConfigError',
    'NullNodeError',
    # API
    'create',
    'traverse',
    'find_nodes',
    'count_nodes',
    'get_leaf_nodes',
]
