from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from shargparse.core.interfaces.render import SplicePlannerProtocol
from shargparse.core.models import ScanResult, SpliceResult
from shargparse.logging.helpers import get_logger


def _carriage_return(lines: Sequence[str], index: int) -> str:
    """'\\r' when the line at *index* came from a CRLF-terminated file."""
    if 0 <= index < len(lines) and lines[index].endswith("\r"):
        return "\r"
    return ""


class SplicePlanner(SplicePlannerProtocol):
    """Places a rendered block into the original script lines.

    The block always lands right after the last declaration, wherever the
    previous block was. The merge is computed once from the original lines,
    and the block takes the line ending of the line it is anchored on.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger("splice")

    def plan(self, lines: Sequence[str], rendered: str, scan: ScanResult) -> SpliceResult:
        new_lines: List[str] = list(lines)
        anchor = scan.last_declaration_line
        boundary = scan.boundary

        if boundary is None:
            if anchor < 0:
                self._log.debug("no declarations and no previous block, nothing to anchor on")
                return SpliceResult(lines=new_lines, unplaced=rendered)
            insert_at = anchor + 1
        else:
            del new_lines[boundary.start:boundary.stop + 1]
            if anchor < 0:
                insert_at = boundary.start
            elif anchor > boundary.stop:
                insert_at = anchor + 1 - len(boundary)
            elif anchor >= boundary.start:
                # A directive inside the old block goes away with it.
                insert_at = boundary.start
            else:
                insert_at = anchor + 1
            self._log.debug("replacing block at lines %d-%d", boundary.start + 1, boundary.stop + 1)

        cr = _carriage_return(lines, anchor if anchor >= 0 else boundary.start)
        block = [line + cr for line in rendered.split("\n")]
        new_lines[insert_at:insert_at] = block
        self._log.debug("inserted %d line(s) at line %d", len(block), insert_at + 1)
        return SpliceResult(lines=new_lines)
