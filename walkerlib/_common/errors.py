"""Exceptions raised by walkerlib.

Only precondition violations are raised by the library itself. Errors
raised by a successor function or a tracker propagate unchanged to the
consumer at the pull that triggered them.
"""


class WalkerError(Exception):
    """Base class for all walkerlib errors."""
    pass


class WalkerConfigError(WalkerError, ValueError):
    """Raised when a walker is built from an invalid configuration."""
    pass


class NullNodeError(WalkerError, ValueError):
    """Raised when None is passed as an initial node."""
    pass
