from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from shargparse.constants import HELP_FLAG_NAME, HELP_FLAG_SHORT
from shargparse.core.errors import FlagConflictError
from shargparse.core.models import FlagDecl
from shargparse.logging.helpers import get_logger

# The built-in help flag takes part in uniqueness checks like a declared one.
_RESERVED = FlagDecl(line_number=-1, name=HELP_FLAG_NAME, short=HELP_FLAG_SHORT, help="")


class ConflictValidator:
    """Rejects flags sharing a short alias or a long name.

    Aliases are checked before names, both in declaration order, so the
    reported "first" flag is always the earlier one in the script.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger("validator")

    def validate(self, flags: Sequence[FlagDecl]) -> None:
        known_short: Dict[str, FlagDecl] = {_RESERVED.short: _RESERVED}
        for f in flags:
            if not f.short:
                continue
            first = known_short.get(f.short)
            if first is not None:
                raise FlagConflictError(
                    f"both {first.name} and {f.name} have conflicting short names ('-{f.short}')"
                )
            known_short[f.short] = f

        known_long: Dict[str, FlagDecl] = {_RESERVED.name: _RESERVED}
        for f in flags:
            first = known_long.get(f.name)
            if first is not None:
                raise FlagConflictError(
                    f"both {first.name} and {f.name} have conflicting names ('--{f.name}')"
                )
            known_long[f.name] = f

        self._log.debug("validated %d flag(s)", len(flags))
