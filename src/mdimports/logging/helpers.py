from __future__ import annotations

"""Logging helpers shared by every mdimports module.

    - JsonLogFormatter: one JSON object per record (ts, level, module, msg,
      version and an optional ctx mapping).
    - setup_base_logger: configures the 'mdimports' logger exactly once.
    - get_logger: namespaced child loggers ('mdimports.*').
    - trace_io: debug traces gated by MDIMPORTS_TRACE_IO.

The diagnostic stream is stderr; expanded documents never go through it.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

BASE_LOGGER = 'mdimports'


class JsonLogFormatter(logging.Formatter):
    """Compact JSON records with a fixed schema."""

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        # Imported lazily: the package __init__ imports this module.
        from mdimports import __version__

        return str(__version__)

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            'ts': ts.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'module': record.name,
            'msg': record.getMessage(),
            'version': self._version,
        }
        ctx = getattr(record, 'context', None)
        if isinstance(ctx, dict) and ctx:
            payload['ctx'] = ctx
        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'mdimports' logger once and return it.

    A second call only adjusts the level; handlers are never duplicated.
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    if base.handlers:
        return base

    base.propagate = False
    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'mdimports'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{BASE_LOGGER}.{name}')


def is_trace_io_enabled() -> bool:
    return os.getenv('MDIMPORTS_TRACE_IO') == '1'


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit a debug trace for an IO step when MDIMPORTS_TRACE_IO=1."""
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug('%s | ctx=%r', message, ctx, extra={'context': ctx})
    else:
        logger.debug('%s', message)
