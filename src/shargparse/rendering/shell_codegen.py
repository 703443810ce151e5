from __future__ import annotations

"""
shell_codegen – renders declarations into a self-contained POSIX sh parser.

The output is a pure function of the (already validated) declarations:

    param_<name>=""                 one per parameter
    _arg_parse_params_set=0         only when parameters exist
    flag_<var>="<default>"          one per flag
    while [ $# -gt 0 ] ; do case ... esac ; shift ; done
    <arity check>                   only when parameters exist

framed by the start/stop banners so a later run can replace it.
"""

from typing import List, Optional, Sequence

from shargparse.constants import (
    FLAG_SENTINEL_VALUE,
    HELP_FLAG_NAME,
    HELP_FLAG_SHORT,
    HELP_FLAG_TEXT,
    PARAMS_COUNTER_VAR,
    START_BANNER,
    STOP_BANNER,
)
from shargparse.core.interfaces.render import CodegenProtocol, TemplateEngineProtocol
from shargparse.core.models import FlagDecl, ParamDecl
from shargparse.rendering import templates as T
from shargparse.rendering.template_engine import SingleBraceTemplateEngine

# "-x, " in front of "--name", plus the "--" itself.
_SHORT_FLAG_WIDTH = 2
_FORMATTING_WIDTH = 2
_LONG_PREFIX_WIDTH = 2
_COLUMN_GAP = "   "

_DQUOTE_SPECIALS = ("\\", '"', "$", "`")


def dquote_escape(value: str) -> str:
    """Escape *value* for embedding between double quotes in sh."""
    for ch in _DQUOTE_SPECIALS:
        value = value.replace(ch, "\\" + ch)
    return value


def format_flag_help(name: str, short: Optional[str], help_text: str, max_name_width: int) -> str:
    """Return one aligned row of the flag table, e.g. '  -v, --verbose    text'."""
    width = _SHORT_FLAG_WIDTH + _FORMATTING_WIDTH + _LONG_PREFIX_WIDTH + max_name_width
    rep = f"--{name}"
    if short:
        rep = f"-{short}, {rep}"
    return f"  {rep.ljust(width)}{_COLUMN_GAP}{help_text}"


def flag_case_pattern(flag: FlagDecl) -> str:
    if flag.short:
        return f"-{flag.short} | --{flag.name}"
    return f"--{flag.name}"


class ShellCodegen(CodegenProtocol):
    """Template-driven renderer for the generated argument parser."""

    def __init__(self, *, template_engine: Optional[TemplateEngineProtocol] = None) -> None:
        self._tpl = template_engine or SingleBraceTemplateEngine()

    def render(self, params: Sequence[ParamDecl], flags: Sequence[FlagDecl]) -> str:
        out: List[str] = [START_BANNER]
        out.extend(self._declarations(params, flags))
        out.append(T.LOOP_OPEN)
        out.extend(self._help_case(params, flags))
        out.extend(self._t(T.FLAG_CASE, pattern=flag_case_pattern(f), var=f.var_name,
                           sentinel=FLAG_SENTINEL_VALUE) for f in flags)
        out.append(T.UNKNOWN_FLAG_CASE)
        out.extend(self._positional_case(params))
        out.append(T.LOOP_CLOSE)
        if params:
            out.append(self._t(T.ARITY_CHECK, counter=PARAMS_COUNTER_VAR, count=str(len(params))))
        out.append(STOP_BANNER)
        return "\n".join(out)

    def _t(self, template: str, **variables: str) -> str:
        return self._tpl.render(template, variables)

    def _declarations(self, params: Sequence[ParamDecl], flags: Sequence[FlagDecl]) -> List[str]:
        lines = [self._t(T.PARAM_DECL, name=p.name) for p in params]
        if params:
            lines.append(self._t(T.COUNTER_DECL, counter=PARAMS_COUNTER_VAR))
        lines.extend(
            self._t(T.FLAG_DECL, var=f.var_name, default=dquote_escape(f.default or "")) for f in flags
        )
        return lines

    def _help_case(self, params: Sequence[ParamDecl], flags: Sequence[FlagDecl]) -> List[str]:
        usage_args = "".join(f" {p.name.upper()}" for p in params)
        lines = [self._t(T.HELP_OPEN, usage_args=usage_args)]
        if params:
            lines.append(T.HELP_BLANK)
            lines.extend(
                self._t(T.HELP_PARAM, upper=p.name.upper(), help=dquote_escape(p.help)) for p in params
            )
        lines.append(T.HELP_FLAGS_HEADER)

        width = max([len(HELP_FLAG_NAME)] + [len(f.name) for f in flags])
        rows = [format_flag_help(HELP_FLAG_NAME, HELP_FLAG_SHORT, HELP_FLAG_TEXT, width)]
        rows.extend(format_flag_help(f.name, f.short, f.help, width) for f in flags)
        lines.extend(self._t(T.HELP_FLAG_ROW, row=dquote_escape(r)) for r in rows)
        lines.append(T.HELP_CLOSE)
        return lines

    def _positional_case(self, params: Sequence[ParamDecl]) -> List[str]:
        lines = [T.POSITIONAL_OPEN]
        if not params:
            lines.append(T.POSITIONAL_NONE)
        else:
            for index, p in enumerate(params):
                head = T.POSITIONAL_FIRST if index == 0 else T.POSITIONAL_NEXT
                lines.append(self._t(head, counter=PARAMS_COUNTER_VAR, index=str(index)))
                lines.append(self._t(T.POSITIONAL_ASSIGN, name=p.name, counter=PARAMS_COUNTER_VAR))
            lines.append(self._t(T.POSITIONAL_OVERFLOW, counter=PARAMS_COUNTER_VAR, count=str(len(params))))
        lines.append(T.POSITIONAL_CLOSE)
        return lines
