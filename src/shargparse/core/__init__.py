from __future__ import annotations

"""Public surface for shargparse.core.

Stable import location for the value types and error hierarchy shared by the
parsing, rendering and runtime layers:

    from shargparse.core import FlagDecl, ScanResult, BoundaryError, ...
"""

from shargparse.core.errors import (
    BoundaryError,
    DirectiveSyntaxError,
    FlagConflictError,
    ScriptIOError,
    ShargparseError,
)
from shargparse.core.models import (
    Boundary,
    FlagDecl,
    GenerateResult,
    ParamDecl,
    ScanResult,
    SpliceResult,
)

__all__ = [
    'Boundary',
    'BoundaryError',
    'DirectiveSyntaxError',
    'FlagConflictError',
    'FlagDecl',
    'GenerateResult',
    'ParamDecl',
    'ScanResult',
    'ScriptIOError',
    'ShargparseError',
    'SpliceResult',
]
