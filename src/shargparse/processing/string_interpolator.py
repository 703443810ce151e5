"""
string_interpolator – Minimal {single-brace} template interpolation.

Rules:

  • {name}      → replaced by mapping.get("name", "")
  • {{ / }}     → rendered as a literal "{" / "}"
  • any other brace run (e.g. the shell's "${1%%=*}") is copied verbatim,
    because only identifiers are treated as placeholders

Substituted values are never re-scanned, so help texts containing braces are
emitted as written.
"""

import re
from typing import Dict


class StringInterpolator:
    """Single-brace interpolator with double-brace escaping."""

    _IDENT_RX = re.compile(r"[A-Za-z_]\w*")

    def interpolate(self, tpl: str, mapping: Dict[str, str]) -> str:
        """Interpolate *tpl* using *mapping*.

        Parameters
        ----------
        tpl:
            Template string potentially containing {placeholders} or {{escapes}}.
        mapping:
            Variable values to inject. Missing keys resolve to "".

        Returns
        -------
        str
            The interpolated result.
        """
        out: list[str] = []
        i = 0
        n = len(tpl)

        while i < n:
            if tpl.startswith("{{", i):
                out.append("{")
                i += 2
                continue
            if tpl.startswith("}}", i):
                out.append("}")
                i += 2
                continue

            if tpl[i] == "{":
                j = tpl.find("}", i + 1)
                if j != -1 and self._IDENT_RX.fullmatch(tpl[i + 1:j]):
                    out.append(mapping.get(tpl[i + 1:j], ""))
                    i = j + 1
                    continue
            out.append(tpl[i])
            i += 1

        return "".join(out)
