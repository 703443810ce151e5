from __future__ import annotations
"""Source location carried into diagnostics.

Line numbers are 1-based here; declarations keep 0-based indices, and the
conversion happens only when a message is formatted.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class DirectiveSource:
    """Origin of a script line.

    Attributes:
        path: Path of the script if known.
        line: 1-based line number.
    """
    path: Optional[Path] = None
    line: Optional[int] = None

    def format(self) -> str:
        """Return a label such as 'run.sh:line 4', or 'line 4' without a path."""
        parts: list[str] = []
        if self.path:
            parts.append(str(self.path))
        if self.line is not None:
            parts.append(f"line {self.line}")
        return ":".join(parts) if parts else "<input>"

    def at_index(self, index: int) -> "DirectiveSource":
        """Return a copy pointing at the 0-based line *index*."""
        return DirectiveSource(path=self.path, line=index + 1)
