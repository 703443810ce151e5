# shargparse/parsing/parser.py
from __future__ import annotations

import argparse


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser of the shargparse tool itself.

    Notes:
        - A single script path is accepted; stdout is the default output.
        - --version is resolved lazily to avoid importing the package root.
    """
    from shargparse import __version__

    p = argparse.ArgumentParser(
        prog="shargparse",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTIONS] SCRIPT_FILE",
        description=(
            "shargparse – generate a POSIX sh argument parser from comment directives\n"
            "Directives: '# flag: name[,f] help text (default: value)' and\n"
            "'# param: name help text'."
        ),
    )

    p.add_argument(
        "script",
        metavar="SCRIPT_FILE",
        help="Shell script to scan; its argparse section is regenerated.",
    )

    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    g_out.add_argument(
        "-i",
        "--in-place",
        action="store_true",
        dest="in_place",
        help=(
            "Rewrite SCRIPT_FILE in place, keeping its permission bits. "
            "Without it the merged script is written to stdout."
        ),
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help=(
            "Emit logs in JSON format instead of plain text. "
            "You may also set SHARGPARSE_JSON_LOGS=1."
        ),
    )
    g_misc.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p
