from __future__ import annotations

from typing import Mapping, Protocol, Sequence, runtime_checkable

from shargparse.core.models import FlagDecl, ParamDecl, ScanResult, SpliceResult


@runtime_checkable
class TemplateEngineProtocol(Protocol):
    """String template engine used to expand the shell fragments."""

    def render(self, template: str, variables: Mapping[str, str]) -> str:
        """Expand *template*; names missing from *variables* render as ''."""
        ...


@runtime_checkable
class CodegenProtocol(Protocol):
    """Renders validated declarations into a framed block of shell source."""

    def render(self, params: Sequence[ParamDecl], flags: Sequence[FlagDecl]) -> str:
        """Return the generated block, start and stop banners included."""
        ...


@runtime_checkable
class SplicePlannerProtocol(Protocol):
    """Merges a rendered block back into the original script lines."""

    def plan(self, lines: Sequence[str], rendered: str, scan: ScanResult) -> SpliceResult:
        """Compute the merged line sequence from the untouched original lines."""
        ...
