from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from shargparse.core.interfaces.render import CodegenProtocol, SplicePlannerProtocol
from shargparse.core.models import GenerateResult
from shargparse.logging.helpers import get_logger
from shargparse.parsing.directives import DeclarationCollector
from shargparse.parsing.source import DirectiveSource
from shargparse.parsing.validator import ConflictValidator
from shargparse.rendering.shell_codegen import ShellCodegen
from shargparse.rendering.splice import SplicePlanner


@dataclass(frozen=True)
class RunConfig:
    """Options of a single command-line invocation."""
    script: Path
    in_place: bool = False
    json_logs: bool = False


@dataclass
class ArgparsePipeline:
    """collect → validate → render → splice, over one in-memory script.

    Every stage is injectable; the defaults are the stock implementations.
    """
    collector: Optional[DeclarationCollector] = None
    validator: Optional[ConflictValidator] = None
    codegen: Optional[CodegenProtocol] = None
    splicer: Optional[SplicePlannerProtocol] = None
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_logger("pipeline")
        self.collector = self.collector or DeclarationCollector()
        self.validator = self.validator or ConflictValidator()
        self.codegen = self.codegen or ShellCodegen()
        self.splicer = self.splicer or SplicePlanner()

    def run_lines(self, lines: Sequence[str], *, path: Optional[Path] = None) -> GenerateResult:
        scan = self.collector.parse_lines(lines, src=DirectiveSource(path=path))
        self.validator.validate(scan.flags)
        rendered = self.codegen.render(scan.params, scan.flags)
        merged = self.splicer.plan(lines, rendered, scan)
        self.logger.debug(
            "generated parser for %s: %d param(s), %d flag(s), spliced=%s",
            path or "<input>", len(scan.params), len(scan.flags), merged.spliced,
        )
        return GenerateResult(text=merged.text(), rendered=rendered, scan=scan, unplaced=merged.unplaced)

    def run_text(self, text: str, *, path: Optional[Path] = None) -> GenerateResult:
        return self.run_lines(text.split("\n"), path=path)


def generate(text: str) -> GenerateResult:
    """Regenerate the argparse block of a script given as a string."""
    return ArgparsePipeline().run_text(text)
