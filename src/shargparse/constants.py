from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Banner lines framing the generated block. Both must satisfy the boundary
# pattern in shargparse.parsing.grammar so a later run can find them again.
START_BANNER: str = '# argparse:start BELOW IS AUTO-GENERATED - DO NOT TOUCH (by: shargparse)'
STOP_BANNER: str = '# argparse:stop ABOVE CODE IS AUTO-GENERATED - DO NOT TOUCH'

# Implicit flag present in every generated parser.
HELP_FLAG_NAME: str = 'help'
HELP_FLAG_SHORT: str = 'h'
HELP_FLAG_TEXT: str = 'print this help message'

# Shell variable counting consumed positional arguments.
PARAMS_COUNTER_VAR: str = '_arg_parse_params_set'

# Value stored for a flag given without a value.
FLAG_SENTINEL_VALUE: str = 'true'

NO_ANCHOR_WARNING: str = (
    '# (DO NOT COPY THIS LINE) Unable to find a place to splice argparse section, '
    'just printing it out instead:'
)
