#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shell codegen: exact rendering of fixed declaration sets, help alignment,
double-quote escaping, and (when a POSIX sh is available) the runtime
behaviour of the generated parser.
"""
from __future__ import annotations

import shutil
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path
from typing import List, Sequence

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from shargparse.constants import START_BANNER, STOP_BANNER  # noqa: E402
from shargparse.core.models import FlagDecl, ParamDecl  # noqa: E402
from shargparse.processing.string_interpolator import StringInterpolator  # noqa: E402
from shargparse.rendering.shell_codegen import ShellCodegen, dquote_escape, format_flag_help  # noqa: E402
from shargparse.rendering.template_engine import SingleBraceTemplateEngine  # noqa: E402

SH = shutil.which("sh")

NAME = ParamDecl(line_number=1, name="name", help="the user's name")
VERBOSE = FlagDecl(
    line_number=2,
    name="verbose",
    short="v",
    default="false",
    help="enable verbose output (default: false)",
)

EXPECTED_SCENARIO = "\n".join([
    START_BANNER,
    'param_name=""',
    "_arg_parse_params_set=0",
    'flag_verbose="false"',
    "while [ $# -gt 0 ] ; do",
    '\tcase "${1%%=*}" in',
    "\t\t-h | --help)",
    "\t\t\tprintf '%s\\n' \"Usage:\"",
    "\t\t\tprintf '%s\\n' \"  $0 NAME [flags]\"",
    "\t\t\techo",
    "\t\t\tprintf '%s\\n' \"  NAME: the user's name\"",
    "\t\t\techo",
    "\t\t\tprintf '%s\\n' \"Flags:\"",
    "\t\t\tprintf '%s\\n' \"  -h, --help      print this help message\"",
    "\t\t\tprintf '%s\\n' \"  -v, --verbose   enable verbose output (default: false)\"",
    "\t\t\texit 1",
    "\t\t;;",
    "\t\t-v | --verbose)",
    '\t\t\tif [ "${1#*=}" != "$1" ] ; then',
    '\t\t\t\tflag_verbose="${1#*=}"',
    '\t\t\telif [ $# -eq 1 ] || [ "${2#-}" != "$2" ] ; then',
    "\t\t\t\tflag_verbose=true",
    "\t\t\telse",
    "\t\t\t\tshift",
    '\t\t\t\tflag_verbose="$1"',
    "\t\t\tfi",
    "\t\t;;",
    "\t\t-*)",
    "\t\t\tprintf 'Unknown flag \"%s\"\\n' \"$1\" >&2",
    "\t\t\texit 1",
    "\t\t;;",
    "\t\t*)",
    "\t\t\tif [ $_arg_parse_params_set -eq 0 ] ; then",
    '\t\t\t\tparam_name="$1"',
    "\t\t\t\t_arg_parse_params_set=$((_arg_parse_params_set + 1))",
    "\t\t\telse",
    "\t\t\t\t_arg_parse_params_set=$((_arg_parse_params_set + 1))",
    "\t\t\t\tprintf '%s: error: accepts 1 arg(s), received %s\\n' \"$0\" \"$_arg_parse_params_set\" >&2",
    "\t\t\t\texit 1",
    "\t\t\tfi",
    "\t\t;;",
    "\tesac",
    "\tshift",
    "done",
    "if [ $_arg_parse_params_set -lt 1 ] ; then",
    "\tprintf '%s: error: accepts 1 arg(s), received %s\\n' \"$0\" \"$_arg_parse_params_set\" >&2",
    "\texit 1",
    "fi",
    "unset _arg_parse_params_set",
    STOP_BANNER,
])


# --------------------------------------------------------------------------- #
#  1. Pure rendering                                                          #
# --------------------------------------------------------------------------- #
class RenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.cg = ShellCodegen()

    def test_scenario_renders_exactly(self) -> None:
        self.assertEqual(self.cg.render([NAME], [VERBOSE]), EXPECTED_SCENARIO)

    def test_rendering_is_deterministic(self) -> None:
        self.assertEqual(self.cg.render([NAME], [VERBOSE]), self.cg.render([NAME], [VERBOSE]))

    def test_no_params_has_no_counter(self) -> None:
        out = self.cg.render([], [VERBOSE])
        self.assertNotIn("_arg_parse_params_set", out)
        self.assertIn('"  $0 [flags]"', out)
        self.assertIn("accepts 0 arg(s), received 1 or more", out)

    def test_empty_declarations_still_render_help(self) -> None:
        out = self.cg.render([], []).split("\n")
        self.assertEqual(out[0], START_BANNER)
        self.assertEqual(out[-1], STOP_BANNER)
        self.assertIn("\t\t\tprintf '%s\\n' \"  -h, --help   print this help message\"", out)

    def test_params_chain_in_declaration_order(self) -> None:
        params = [ParamDecl(0, "src", "from"), ParamDecl(1, "dst", "to")]
        out = self.cg.render(params, [])
        self.assertIn('"  $0 SRC DST [flags]"', out)
        self.assertLess(out.index("-eq 0 ] ; then\n\t\t\t\tparam_src="), out.index("-eq 1 ] ; then\n\t\t\t\tparam_dst="))
        self.assertIn("\t\t\telif [ $_arg_parse_params_set -eq 1 ] ; then", out)
        self.assertIn("accepts 2 arg(s)", out)
        self.assertIn("if [ $_arg_parse_params_set -lt 2 ] ; then", out)

    def test_flag_without_short_uses_long_pattern_only(self) -> None:
        flag = FlagDecl(0, "dry-run", "skip writes")
        out = self.cg.render([], [flag])
        self.assertIn("\t\t--dry-run)", out)
        self.assertIn('flag_dry_run=""', out)
        self.assertIn('flag_dry_run="${1#*=}"', out)

    def test_default_and_help_are_escaped(self) -> None:
        flag = FlagDecl(0, "prompt", 'shown as "$PS1" (default: "$ ")', default='"$ "')
        out = self.cg.render([], [flag])
        self.assertIn('flag_prompt="\\"\\$ \\""', out)
        self.assertIn('shown as \\"\\$PS1\\"', out)

    def test_custom_template_engine_is_used(self) -> None:
        class Upper(SingleBraceTemplateEngine):
            def render(self, template, variables):
                return super().render(template, variables).upper()

        out = ShellCodegen(template_engine=Upper()).render([NAME], [])
        self.assertIn('PARAM_NAME=""', out)


class HelpFormatTests(unittest.TestCase):
    def test_rows_align_on_longest_name(self) -> None:
        width = len("overwrite")
        rows = [
            format_flag_help("help", "h", "print", width),
            format_flag_help("overwrite", "o", "clobber", width),
            format_flag_help("out", None, "target", width),
        ]
        starts = {row.index(text) for row, text in zip(rows, ("print", "clobber", "target"))}
        self.assertEqual(starts, {2 + 2 + 2 + 2 + width + 3})
        self.assertTrue(rows[2].startswith("  --out "))

    def test_dquote_escape(self) -> None:
        self.assertEqual(dquote_escape('a "b" $c `d` \\e'), 'a \\"b\\" \\$c \\`d\\` \\\\e')
        self.assertEqual(dquote_escape("plain it's"), "plain it's")


class InterpolatorTests(unittest.TestCase):
    def test_identifiers_only(self) -> None:
        interp = StringInterpolator()
        self.assertEqual(interp.interpolate('x="${1%%=*}" {v}', {"v": "ok"}), 'x="${1%%=*}" ok')
        self.assertEqual(interp.interpolate("{{v}} {missing}", {"v": "no"}), "{v} ")

    def test_values_are_not_rescanned(self) -> None:
        self.assertEqual(StringInterpolator().interpolate("{a}", {"a": "{b}", "b": "x"}), "{b}")


# --------------------------------------------------------------------------- #
#  2. Generated parser at runtime                                             #
# --------------------------------------------------------------------------- #
@unittest.skipUnless(SH, "POSIX sh not available")
class GeneratedParserRuntimeTests(unittest.TestCase):
    REPORT = 'printf "%s|%s|%s\\n" "$param_name" "$flag_verbose" "$flag_out_dir"'

    def setUp(self) -> None:
        flags = [
            VERBOSE,
            FlagDecl(3, "out-dir", "where to write (default: build)", short="o", default="build"),
        ]
        block = ShellCodegen().render([NAME], flags)
        self._td = tempfile.TemporaryDirectory()
        self.script = Path(self._td.name) / "demo.sh"
        self.script.write_text(f"{block}\n{self.REPORT}\n", encoding="utf-8")

    def tearDown(self) -> None:
        self._td.cleanup()

    def _run(self, args: Sequence[str]) -> subprocess.CompletedProcess:
        return subprocess.run(
            [SH, str(self.script), *args], capture_output=True, text=True, timeout=30
        )

    def _state(self, args: List[str]) -> str:
        proc = self._run(args)
        self.assertEqual(proc.returncode, 0, proc.stderr)
        return proc.stdout.strip()

    def test_param_and_boolean_flag(self) -> None:
        self.assertEqual(self._state(["Bob", "--verbose"]), "Bob|true|build")

    def test_defaults_apply(self) -> None:
        self.assertEqual(self._state(["Bob"]), "Bob|false|build")

    def test_space_and_equals_forms_agree(self) -> None:
        for value in ("dist", "a b", "x=y"):
            with self.subTest(value=value):
                spaced = self._state(["--out-dir", value, "Bob"])
                joined = self._state([f"--out-dir={value}", "Bob"])
                short = self._state(["-o", value, "Bob"])
                self.assertEqual(spaced, joined)
                self.assertEqual(spaced, short)
                self.assertEqual(spaced, f"Bob|false|{value}")

    def test_inline_value_wins_over_next_token(self) -> None:
        self.assertEqual(self._state(["--verbose=no", "Bob"]), "Bob|no|build")

    def test_flag_followed_by_flag_is_boolean(self) -> None:
        self.assertEqual(self._state(["-v", "-o", "dist", "Bob"]), "Bob|true|dist")

    def test_too_few_params(self) -> None:
        proc = self._run(["--verbose"])
        self.assertEqual(proc.returncode, 1)
        self.assertIn("accepts 1 arg(s), received 0", proc.stderr)

    def test_too_many_params(self) -> None:
        proc = self._run(["Bob", "Alice", "--verbose"])
        self.assertEqual(proc.returncode, 1)
        self.assertIn("accepts 1 arg(s), received 2", proc.stderr)
        self.assertEqual(proc.stdout, "")

    def test_unknown_flag(self) -> None:
        proc = self._run(["Bob", "--nope"])
        self.assertEqual(proc.returncode, 1)
        self.assertIn('Unknown flag "--nope"', proc.stderr)

    def test_help(self) -> None:
        proc = self._run(["-h"])
        self.assertEqual(proc.returncode, 1)
        self.assertIn("NAME: the user's name", proc.stdout)
        self.assertIn("  -v, --verbose   enable verbose output (default: false)", proc.stdout)
        self.assertIn("  -o, --out-dir   where to write (default: build)", proc.stdout)
        self.assertIn("  -h, --help      print this help message", proc.stdout)

    def test_backslashes_in_help_and_default_are_verbatim(self) -> None:
        flag = FlagDecl(0, "dir", r"target dir (default: C:\new\cfg)", default=r"C:\new\cfg")
        block = ShellCodegen().render([], [flag])
        self.script.write_text(f'{block}\nprintf "%s\\n" "$flag_dir"\n', encoding="utf-8")

        proc = self._run(["-h"])
        self.assertEqual(proc.returncode, 1)
        self.assertTrue(proc.stdout.endswith("target dir (default: C:\\new\\cfg)\n"), proc.stdout)
        self.assertEqual(self._state([]), r"C:\new\cfg")


if __name__ == "__main__":
    unittest.main()
