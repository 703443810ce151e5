"""
template_engine – TemplateEngineProtocol implementation used by the shell codegen.

Fragments in shargparse.rendering.templates are expanded one at a time; the
engine only substitutes {identifier} placeholders so shell parameter
expansions such as "${1%%=*}" pass through untouched.
"""

from typing import Mapping, Optional

from shargparse.core.interfaces.render import TemplateEngineProtocol
from shargparse.processing.string_interpolator import StringInterpolator


class SingleBraceTemplateEngine(TemplateEngineProtocol):
    """Single-brace template engine using :class:`StringInterpolator`.

      • {name}      → variables.get("name", "")
      • {{literal}} → rendered as "{literal}" (escape)
    """

    def __init__(self, *, interpolator: Optional[StringInterpolator] = None) -> None:
        self._interp = interpolator or StringInterpolator()

    def render(self, template: str, variables: Mapping[str, str]) -> str:  # type: ignore[override]
        """Render *template* replacing {placeholders} via *variables*."""
        # Cast to dict to avoid accidental Mapping mutation downstream.
        return self._interp.interpolate(template, dict(variables))
