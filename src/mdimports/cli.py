from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence, TextIO

from mdimports.core.models import ExpansionConfig
from mdimports.errors import ImportExpansionError
from mdimports.logging.factory import DefaultLoggerFactory
from mdimports.logging.helpers import get_logger
from mdimports.parsing.directives import scan
from mdimports.parsing.parser import _build_parser
from mdimports.rendering.expander import ImportExpander

logger = get_logger('mdimports')


def _configure_logging(enable_json: bool, level: int) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    global logger
    logger = DefaultLoggerFactory(json_logs=enable_json, level=level).get_logger('mdimports')


def _fatal(msg: str, code: int = 1) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


def _format_listing(text: str) -> str:
    rows = [f'{d.kind.value}\t{d.start}\t{d.payload}' for d in scan(text)]
    return '\n'.join(rows) + ('\n' if rows else '')


class MdImports:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, stdout: Optional[TextIO] = None) -> str:
        """Run the tool with an argv-like sequence and return the final text.

        The text is also written to -o OUT, or to *stdout* when one is given.
        """
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('MDIMPORTS_JSON_LOGS') == '1'
        _configure_logging(json_logs, logging.WARNING if ns.quiet else logging.INFO)

        if ns.file == '-':
            source: Optional[Path] = None
            text = sys.stdin.read()
        else:
            source = Path(ns.file).expanduser().resolve()
            if not source.is_file():
                _fatal(f'File not found: {ns.file}')
            text = source.read_text(encoding='utf-8', errors='ignore')

        if ns.list_only:
            listing = _format_listing(text)
            if stdout is not None:
                stdout.write(listing)
            return listing

        overrides = {'force_context': True} if ns.force_context else {}
        expander = ImportExpander(config=ExpansionConfig.from_env(**overrides))
        try:
            if source is None:
                out = expander.expand(text, Path.cwd())
            else:
                out = expander.expand_file(source)
        except ImportExpansionError as exc:
            _fatal(f'Import error: {exc}')

        if ns.report and expander.last_report is not None:
            sys.stderr.write(expander.last_report.to_json() + '\n')
        if ns.output:
            Path(ns.output).write_text(out, encoding='utf-8')
            logger.info('✔ expanded document written to %s', ns.output)
        elif stdout is not None:
            stdout.write(out)
        return out


def main() -> NoReturn:
    """Entry point for the `mdimports` console script."""
    try:
        MdImports.run(sys.argv[1:], stdout=sys.stdout)
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
