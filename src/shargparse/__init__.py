from __future__ import annotations

import logging
from typing import Optional

from shargparse.constants import START_BANNER, STOP_BANNER
from shargparse.core.errors import (
    BoundaryError,
    DirectiveSyntaxError,
    FlagConflictError,
    ScriptIOError,
    ShargparseError,
)
from shargparse.core.interfaces.render import TemplateEngineProtocol
from shargparse.core.models import FlagDecl, GenerateResult, ParamDecl, ScanResult
from shargparse.parsing.directives import DeclarationCollector
from shargparse.parsing.grammar import DirectiveGrammar
from shargparse.parsing.validator import ConflictValidator
from shargparse.rendering.shell_codegen import ShellCodegen
from shargparse.rendering.splice import SplicePlanner
from shargparse.rendering.template_engine import SingleBraceTemplateEngine
from shargparse.runtime.pipeline import ArgparsePipeline, RunConfig, generate

__version__ = '0.3.0'


def pipeline_factory(
    *,
    template_engine: Optional[TemplateEngineProtocol] = None,
    logger: Optional[logging.Logger] = None,
) -> ArgparsePipeline:
    """Factory helper that returns a stock ArgparsePipeline.

    Falls back to SingleBraceTemplateEngine when no TemplateEngine is provided.
    """
    engine = template_engine or SingleBraceTemplateEngine()
    return ArgparsePipeline(codegen=ShellCodegen(template_engine=engine), logger=logger)


__all__ = [
    'ArgparsePipeline',
    'BoundaryError',
    'ConflictValidator',
    'DeclarationCollector',
    'DirectiveGrammar',
    'DirectiveSyntaxError',
    'FlagConflictError',
    'FlagDecl',
    'GenerateResult',
    'ParamDecl',
    'RunConfig',
    'ScanResult',
    'ScriptIOError',
    'ShargparseError',
    'ShellCodegen',
    'SingleBraceTemplateEngine',
    'SplicePlanner',
    'START_BANNER',
    'STOP_BANNER',
    'generate',
    'pipeline_factory',
]
