"""Configuration re-export for the synchronous walker.

This module re-exports configuration components from the _common
package so users never import _common directly.
"""

from .._common.config import (
    WalkerConfig,
    TraversalStrategy,
    TrackingMode,
    InsertionOrder,
    SuccessorFunction,
    Tracker,
    parse_strategy,
)

__all__ = [
    'WalkerConfig',
    'TraversalStrategy',
    'TrackingMode',
    'InsertionOrder',
    'SuccessorFunction',
    'Tracker',
    'parse_strategy',
]
