from __future__ import annotations


class ShargparseError(Exception):
    """Base class for every error surfaced to the command line."""


class DirectiveSyntaxError(ShargparseError, ValueError):
    """Raised when a `# flag:` / `# param:` line does not have the expected shape."""


class BoundaryError(ShargparseError, ValueError):
    """Raised when `argparse:start` / `argparse:stop` markers are misplaced."""


class FlagConflictError(ShargparseError, ValueError):
    """Raised when two flags share a long name or a short alias."""


class ScriptIOError(ShargparseError, OSError):
    """Raised when the target script cannot be stat'ed, read or written."""
