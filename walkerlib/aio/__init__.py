"""Asynchronous implementation of walkerlib.

Walks are async iterators, so successor functions and trackers may be
coroutines that do I/O (HTTP crawls, database lookups) between pulls.
"""

# Core components
from .core import AsyncWalker, AsyncTraversal

# High-level API
from .api import (
    create_async,
    traverse_async,
    collect_async,
    count_nodes_async,
)

# Configuration and tracking (re-exported from _common)
from .._common.config import (
    WalkerConfig,
    TraversalStrategy,
    TrackingMode,
    parse_strategy,
)
from .._common.tracking import always_track, SetTracker, ConcurrentSetTracker
from .._common.errors import WalkerError, WalkerConfigError, NullNodeError

__all__ = [
    # Core
    'AsyncWalker',
    'AsyncTraversal',
    # API
    'create_async',
    'traverse_async',
    'collect_async',
    'count_nodes_async',
    # Config
    'WalkerConfig',
    'TraversalStrategy',
    'TrackingMode',
    'parse_strategy',
    # Tracking
    'always_track',
    'SetTracker',
    'ConcurrentSetTracker',
    # Errors
    'WalkerError',
    'WalkerConfigError',
    'NullNodeError',
]
