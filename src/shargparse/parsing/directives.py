from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, Optional

from shargparse.core.errors import BoundaryError
from shargparse.core.models import Boundary, FlagDecl, ParamDecl, ScanResult
from shargparse.logging.helpers import get_logger
from shargparse.parsing.grammar import BoundaryMarker, DirectiveGrammar
from shargparse.parsing.source import DirectiveSource


class _BoundaryState(Enum):
    NONE = "none"
    STARTED = "started"
    CLOSED = "closed"


class _BoundaryTracker:
    """State machine over `argparse:start` / `argparse:stop` markers.

    none --start--> started --stop--> closed; every other transition is an
    error. Line numbers in messages are 1-based.
    """

    def __init__(self) -> None:
        self.state = _BoundaryState.NONE
        self.start: Optional[int] = None
        self.stop: Optional[int] = None

    def feed(self, marker: BoundaryMarker) -> None:
        lno = marker.line_number + 1
        if marker.is_start:
            if self.state is _BoundaryState.STARTED:
                raise BoundaryError(
                    f"2 'argparse:start' markers found on line {self.start + 1} and {lno}, expecting only 1"
                )
            if self.state is _BoundaryState.CLOSED:
                raise BoundaryError(
                    f"'argparse:stop' (line: {self.stop + 1}) found before 'argparse:start' (line: {lno})"
                )
            self.start = marker.line_number
            self.state = _BoundaryState.STARTED
            return

        if self.state is _BoundaryState.CLOSED:
            raise BoundaryError(
                f"2 'argparse:stop' markers found on line {self.stop + 1} and {lno}, expected only 1"
            )
        if self.state is _BoundaryState.NONE:
            raise BoundaryError(
                f"expected 'argparse:start' to be found before 'argparse:stop' (line: {lno})"
            )
        self.stop = marker.line_number
        self.state = _BoundaryState.CLOSED

    def finish(self) -> Optional[Boundary]:
        if self.state is _BoundaryState.STARTED:
            raise BoundaryError(f"unterminated argparse section started on line {self.start + 1}")
        if self.state is _BoundaryState.CLOSED:
            return Boundary(start=self.start, stop=self.stop)
        return None


class DeclarationCollector:
    """Walks script lines in order and gathers flag/param declarations.

    Also locates the (single) previously generated block, if any.
    """

    def __init__(self, *, grammar: Optional[DirectiveGrammar] = None, logger: Optional[logging.Logger] = None) -> None:
        self._grammar = grammar or DirectiveGrammar()
        self._log = logger or get_logger("collector")

    def parse_lines(self, lines: Iterable[str], src: Optional[DirectiveSource] = None) -> ScanResult:
        """Collect declarations from an iterable of lines (without newlines)."""
        flags: List[FlagDecl] = []
        params: List[ParamDecl] = []
        tracker = _BoundaryTracker()

        for index, raw in enumerate(lines):
            match = self._grammar.classify(raw, index, src)
            if match is None:
                continue
            if isinstance(match, FlagDecl):
                flags.append(match)
            elif isinstance(match, ParamDecl):
                params.append(match)
            else:
                tracker.feed(match)

        result = ScanResult(flags=tuple(flags), params=tuple(params), boundary=tracker.finish())
        self._log.debug(
            "collected %d flag(s), %d param(s), boundary=%s",
            len(result.flags), len(result.params), result.boundary,
        )
        return result
