import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

_VAR_UNSAFE_RX = re.compile(r'[^A-Za-z0-9_]')


@dataclass(frozen=True)
class FlagDecl:
    """A `# flag:` directive. `line_number` is the 0-based line index."""
    line_number: int
    name: str
    help: str
    short: Optional[str] = None
    default: Optional[str] = None

    @property
    def var_name(self) -> str:
        """Shell-safe suffix used for the `flag_<var_name>` variable."""
        return _VAR_UNSAFE_RX.sub('_', self.name)


@dataclass(frozen=True)
class ParamDecl:
    """A `# param:` directive; declaration order is positional order."""
    line_number: int
    name: str
    help: str


@dataclass(frozen=True)
class Boundary:
    """Inclusive 0-based line range of a previously generated block."""
    start: int
    stop: int

    def __len__(self) -> int:
        return self.stop - self.start + 1


@dataclass(frozen=True)
class ScanResult:
    flags: Tuple[FlagDecl, ...] = ()
    params: Tuple[ParamDecl, ...] = ()
    boundary: Optional[Boundary] = None

    @property
    def last_declaration_line(self) -> int:
        """Highest line index among all declarations, -1 when there are none."""
        lines = [f.line_number for f in self.flags] + [p.line_number for p in self.params]
        return max(lines, default=-1)

    @property
    def has_declarations(self) -> bool:
        return bool(self.flags or self.params)


@dataclass(frozen=True)
class SpliceResult:
    lines: List[str] = field(default_factory=list)
    unplaced: Optional[str] = None

    @property
    def spliced(self) -> bool:
        return self.unplaced is None

    def text(self) -> str:
        return '\n'.join(self.lines)


@dataclass(frozen=True)
class GenerateResult:
    """Outcome of a full collect → validate → render → splice pass."""
    text: str
    rendered: str
    scan: ScanResult
    unplaced: Optional[str] = None
