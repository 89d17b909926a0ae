from __future__ import annotations

"""
Minimal SDK surface decoupled from the CLI.

Exports:
  * `build_expander`: wires an ImportExpander with default collaborators,
    optionally swapping the HTTP transport or command runner.
  * `expand_imports`: expand a text blob relative to a directory.
  * `expand_file`: expand a document read from disk.

Every call reads MDIMPORTS_FORCE_CONTEXT afresh unless a config is given.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from mdimports.core.interfaces.exec import CommandRunnerProtocol
from mdimports.core.interfaces.net import HTTPTransportProtocol
from mdimports.core.models import ExpansionConfig
from mdimports.discovery.url_fetcher import RemoteContentGate
from mdimports.logging.helpers import get_logger
from mdimports.rendering.expander import ImportExpander
from mdimports.utils.net import ssl_context_for


def build_expander(
    *,
    config: Optional[ExpansionConfig] = None,
    transport: Optional[HTTPTransportProtocol] = None,
    runner: Optional[CommandRunnerProtocol] = None,
    logger: Optional[logging.Logger] = None,
) -> ImportExpander:
    lg = logger or get_logger('imports')
    gate = None
    if transport is not None:
        cfg = config or ExpansionConfig.from_env()
        gate = RemoteContentGate(
            logger=lg,
            user_agent=cfg.user_agent,
            timeout=cfg.fetch_timeout,
            ssl_ctx_provider=ssl_context_for,
            transport=transport,
        )
    return ImportExpander(config=config, gate=gate, runner=runner, logger=lg)


def expand_imports(
    text: str,
    directory: Path | str,
    stack: Sequence[Path] = (),
    *,
    config: Optional[ExpansionConfig] = None,
    transport: Optional[HTTPTransportProtocol] = None,
    runner: Optional[CommandRunnerProtocol] = None,
) -> str:
    """Return *text* with every file, URL and command directive expanded."""
    expander = build_expander(config=config, transport=transport, runner=runner)
    return expander.expand(text, directory, stack)


def expand_file(
    path: Path | str,
    *,
    config: Optional[ExpansionConfig] = None,
    transport: Optional[HTTPTransportProtocol] = None,
    runner: Optional[CommandRunnerProtocol] = None,
) -> str:
    expander = build_expander(config=config, transport=transport, runner=runner)
    return expander.expand_file(path)
