from __future__ import annotations
"""Reading and rewriting the target shell script.

Lines are split on '\\n' only and joined back the same way, so a trailing
newline survives as a final empty line and '\\r' stays part of its line.
"""
import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from shargparse.core.errors import ScriptIOError
from shargparse.logging.helpers import get_logger, trace_io


@dataclass(frozen=True)
class ScriptText:
    path: Path
    lines: List[str]
    mode: int

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ScriptFileService:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger("io.script")

    def read(self, path: Path) -> ScriptText:
        """Read *path*, remembering its permission bits for a later write."""
        try:
            st = path.stat()
        except OSError as exc:
            raise ScriptIOError(f"failed to stat script file: {exc}") from exc
        try:
            with path.open("r", encoding="utf-8", newline="") as fp:
                content = fp.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ScriptIOError(f"failed to read script file: {exc}") from exc

        mode = stat.S_IMODE(st.st_mode)
        trace_io(self._log, "script read", path=str(path), size=len(content), mode=oct(mode))
        return ScriptText(path=path, lines=content.split("\n"), mode=mode)

    def write(self, path: Path, text: str, mode: int) -> None:
        """Overwrite *path* with *text* and restore *mode*."""
        try:
            with path.open("w", encoding="utf-8", newline="") as fp:
                fp.write(text)
            os.chmod(path, mode)
        except OSError as exc:
            raise ScriptIOError(f"failed to write script file: {exc}") from exc
        trace_io(self._log, "script written", path=str(path), size=len(text), mode=oct(mode))
