from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence, TextIO

from shargparse.constants import NO_ANCHOR_WARNING
from shargparse.io.script_file import ScriptFileService
from shargparse.logging.factory import DefaultLoggerFactory
from shargparse.logging.helpers import get_logger, is_trace_io_enabled
from shargparse.parsing.parser import _build_parser
from shargparse.runtime.pipeline import ArgparsePipeline, RunConfig

logger = get_logger('shargparse')


def _configure_logging(enable_json: bool) -> None:
    """Configure process-wide logging, either JSON or plain text.

    SHARGPARSE_TRACE_IO=1 lowers the level to DEBUG so I/O traces and the
    components' debug records are emitted.
    """
    level = logging.DEBUG if is_trace_io_enabled() else logging.INFO
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('shargparse')


def _build_config(argv: Sequence[str]) -> RunConfig:
    ns = _build_parser().parse_args(list(argv))
    return RunConfig(
        script=Path(ns.script),
        in_place=bool(ns.in_place),
        json_logs=bool(ns.json_logs) or os.getenv('SHARGPARSE_JSON_LOGS') == '1',
    )


class ShArgparse:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, stderr: Optional[TextIO] = None) -> str:
        """Run one invocation and return the text meant for stdout.

        In-place runs return ''. A block that cannot be spliced is written to
        *stderr* (sys.stderr by default) after a warning.
        """
        cfg = _build_config(argv)
        _configure_logging(cfg.json_logs)

        io_service = ScriptFileService()
        script = io_service.read(cfg.script)
        result = ArgparsePipeline().run_lines(script.lines, path=cfg.script)

        if result.unplaced is not None:
            err = stderr or sys.stderr
            logger.warning('no directives or argparse markers found in %s', cfg.script)
            err.write(NO_ANCHOR_WARNING + '\n')
            err.write(result.unplaced + '\n')
            err.flush()

        if cfg.in_place:
            io_service.write(cfg.script, result.text, script.mode)
            logger.debug('rewrote %s', cfg.script)
            return ''
        return result.text


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Console entry point (`shargparse`)."""
    try:
        out = ShArgparse.run(sys.argv[1:] if argv is None else argv)
        sys.stdout.write(out)
        sys.stdout.flush()
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('%s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
