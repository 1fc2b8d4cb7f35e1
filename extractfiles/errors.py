"""Exceptions raised by extractfiles.

Traversal itself never fails; the only error surfaced to callers is an
argument-contract violation detected before any recursion begins.
"""


class ExtractFilesError(Exception):
    """Base class for all extractfiles errors."""
    pass


class InvalidArgumentError(ExtractFilesError, TypeError):
    """Raised when an argument has the wrong type or a required one is missing."""
    pass
