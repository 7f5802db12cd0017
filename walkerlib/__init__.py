"""walkerlib - Lazy graph and tree walking.

walkerlib walks any implicitly defined tree or graph: give it a function
returning the successors of a node and it yields nodes in pre-order,
post-order or breadth-first order, one at a time, without materializing
the structure. Infinite structures are fine as long as you stop pulling.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from walkerlib.sync import Walker

Asynchronous:
    from walkerlib.aio import AsyncWalker
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import sync
from . import aio

# The sync walker is the common case
from .sync import Walker, create
from ._common.errors import WalkerError, WalkerConfigError, NullNodeError

__all__ = [
    "__version__",
    "sync",
    "aio",
    "Walker",
    "create",
    "WalkerError",
    "WalkerConfigError",
    "NullNodeError",
]
