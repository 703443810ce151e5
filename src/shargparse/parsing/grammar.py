from __future__ import annotations

"""
grammar – recognizers for the comment directives understood by shargparse.

Three line kinds are recognized, tested in a fixed order:

    # flag: NAME[,SHORT] HELP TEXT (default: VALUE)
    # param: NAME HELP TEXT
    # argparse:start ... / # argparse:stop ...

A line carrying the `# flag:` / `# param:` prefix but not the full shape is an
error, never skipped. Everything else is ignored.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from shargparse.core.errors import DirectiveSyntaxError
from shargparse.core.models import FlagDecl, ParamDecl
from shargparse.parsing.source import DirectiveSource

_PREFIX_RE = re.compile(r"^#\s+(?P<kind>flag|param):\s*(?P<body>.*)$")
_FLAG_RE = re.compile(r"^(?P<name>[a-z_][a-z0-9_-]*)(?:,(?P<short>[a-z]))?\s+(?P<help>.+)$")
_PARAM_RE = re.compile(r"^(?P<name>[a-z_][a-z0-9_]*)\s+(?P<help>.+)$")
_DEFAULT_RE = re.compile(r"\(\s*default\s*:\s*(?P<value>[^)]+)\)", re.IGNORECASE)
_BOUNDARY_RE = re.compile(r"^#\s*argparse:(?P<kind>start|stop).*$")

FLAG_SHAPE = '"flag-name(,f) help text" (parenthesis indicate optional parts)'
PARAM_SHAPE = '"param_name help text"'

BOUNDARY_START = "start"
BOUNDARY_STOP = "stop"


@dataclass(frozen=True)
class BoundaryMarker:
    """An `argparse:start` or `argparse:stop` line."""
    kind: str
    line_number: int

    @property
    def is_start(self) -> bool:
        return self.kind == BOUNDARY_START


LineMatch = Union[FlagDecl, ParamDecl, BoundaryMarker]


class DirectiveGrammar:
    """Classifies single script lines.

    Each recognizer is independent and returns a named-field record, so the
    grammar can be tested line by line without any surrounding file.
    """

    def classify(self, raw: str, index: int, src: Optional[DirectiveSource] = None) -> Optional[LineMatch]:
        """Return the record for line *index* (0-based), or None if it is not ours.

        Raises:
            DirectiveSyntaxError: the line has a directive prefix but a bad shape.
        """
        line = raw.rstrip()
        m = _PREFIX_RE.match(line)
        if m:
            where = (src or DirectiveSource()).at_index(index)
            if m.group("kind") == "flag":
                return self.parse_flag(m.group("body"), index, where)
            return self.parse_param(m.group("body"), index, where)
        return self.match_boundary(line, index)

    @staticmethod
    def parse_flag(body: str, index: int, where: DirectiveSource) -> FlagDecl:
        m = _FLAG_RE.match(body)
        if not m:
            raise DirectiveSyntaxError(f"invalid flag config on {where.format()}, expected {FLAG_SHAPE}")
        help_text = m.group("help")
        return FlagDecl(
            line_number=index,
            name=m.group("name"),
            short=m.group("short"),
            default=extract_default(help_text),
            help=help_text,
        )

    @staticmethod
    def parse_param(body: str, index: int, where: DirectiveSource) -> ParamDecl:
        m = _PARAM_RE.match(body)
        if not m:
            raise DirectiveSyntaxError(f"invalid param config on {where.format()}, expected {PARAM_SHAPE}")
        return ParamDecl(line_number=index, name=m.group("name"), help=m.group("help"))

    @staticmethod
    def match_boundary(line: str, index: int) -> Optional[BoundaryMarker]:
        m = _BOUNDARY_RE.match(line)
        if not m:
            return None
        return BoundaryMarker(kind=m.group("kind"), line_number=index)


def extract_default(help_text: str) -> Optional[str]:
    """Return VALUE from a `(default: VALUE)` marker, or None."""
    m = _DEFAULT_RE.search(help_text)
    if not m:
        return None
    return m.group("value").rstrip()
