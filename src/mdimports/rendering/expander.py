from __future__ import annotations
"""
Recursive import expansion.

`ImportExpander.expand(text, directory)` replaces every directive in *text*
and returns the result. Each call runs three passes over successive
snapshots of the text:

1. file imports (single paths and globs), each target expanded recursively
   from its own directory with a copy of the resolution stack;
2. URL imports, fetched and admitted by the remote content gate;
3. command inlines, run in *directory*.

Within a pass, directives are resolved in reverse position order and the
replacements are folded into the snapshot in one splice. The resolution
stack is a tuple of the absolute paths open on the current branch, so
sibling imports of the same file never see each other, while re-entering a
path on the same branch raises CircularImportError.

The token budget is checked for every glob batch before it is spliced in
and once more for the final text of the top-level call.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from mdimports.constants import LOG_TAG
from mdimports.core.interfaces.exec import CommandRunnerProtocol
from mdimports.core.interfaces.fs import PathResolverProtocol
from mdimports.core.interfaces.net import RemoteContentGateProtocol
from mdimports.core.models import Directive, DirectiveKind, ExpansionConfig, Rejected
from mdimports.core.report import ExpansionReport, StageTimer
from mdimports.discovery.url_fetcher import RemoteContentGate
from mdimports.errors import CircularImportError, ImportReadError, UnsupportedContentTypeError
from mdimports.logging.helpers import get_logger, trace_io
from mdimports.parsing.directives import scan_kind
from mdimports.processing.text_ops import Span, splice
from mdimports.rendering.path_resolver import ImportPathResolver
from mdimports.runtime.shell import ShellCommandRunner
from mdimports.runtime.token_budget import TokenBudget
from mdimports.utils.net import ssl_context_for

ImportStack = Tuple[Path, ...]

GLOB_JOINER = '\n\n'


@dataclass
class _Session:
    """State that lives for exactly one top-level expand() call."""
    budget: TokenBudget
    report: ExpansionReport = field(default_factory=ExpansionReport)


class ImportExpander:
    def __init__(
        self,
        *,
        config: Optional[ExpansionConfig] = None,
        resolver: Optional[PathResolverProtocol] = None,
        gate: Optional[RemoteContentGateProtocol] = None,
        runner: Optional[CommandRunnerProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._config = config
        cfg = config or ExpansionConfig.from_env()
        self._log = logger or get_logger('imports')
        self._resolver = resolver or ImportPathResolver(logger=self._log)
        self._gate = gate or RemoteContentGate(
            logger=self._log,
            user_agent=cfg.user_agent,
            timeout=cfg.fetch_timeout,
            ssl_ctx_provider=ssl_context_for,
        )
        self._runner = runner or ShellCommandRunner(logger=self._log)
        self.last_report: Optional[ExpansionReport] = None

    @property
    def config(self) -> ExpansionConfig:
        """The explicit config, or one read from the environment right now."""
        return self._config or ExpansionConfig.from_env()

    # Public entry points -----------------------------------------------

    def expand(self, text: str, directory: Path | str, stack: Sequence[Path] = ()) -> str:
        """Expand *text* completely, resolving relative imports from *directory*."""
        session = _Session(budget=self._new_budget())
        self.last_report = session.report
        result = self._expand(text, Path(directory).resolve(), tuple(stack), session, depth=0)
        tokens = session.budget.enforce(len(result))
        session.report.admitted_chars = session.budget.admitted_chars
        session.report.finish(result, tokens)
        return result

    def expand_file(self, path: Path | str) -> str:
        """Read and expand a document, with the document itself on the stack."""
        fp = Path(path).expanduser().resolve()
        text = self._read(fp)
        return self.expand(text, fp.parent, (fp,))

    # Passes --------------------------------------------------------------

    def _expand(self, text: str, directory: Path, stack: ImportStack, session: _Session, *, depth: int) -> str:
        with StageTimer(session.report, 'files'):
            text = self._file_pass(text, directory, stack, session, depth)
        with StageTimer(session.report, 'urls'):
            text = self._url_pass(text, session, depth)
        with StageTimer(session.report, 'commands'):
            text = self._command_pass(text, directory, session, depth)
        return text

    def _file_pass(self, text: str, directory: Path, stack: ImportStack, session: _Session, depth: int) -> str:
        spans: List[Span] = []
        for d in reversed(scan_kind(text, DirectiveKind.FILE)):
            replacement = self._import_files(d, directory, stack, session, depth)
            spans.append(self._admit(d, replacement, session, depth))
        return splice(text, spans) if spans else text

    def _url_pass(self, text: str, session: _Session, depth: int) -> str:
        spans: List[Span] = []
        for d in reversed(scan_kind(text, DirectiveKind.URL)):
            admission = self._gate.fetch(d.payload)
            if isinstance(admission, Rejected):
                raise UnsupportedContentTypeError(d.payload, admission.content_type)
            session.report.urls.append(d.payload)
            spans.append(self._admit(d, admission.text, session, depth))
        return splice(text, spans) if spans else text

    def _command_pass(self, text: str, directory: Path, session: _Session, depth: int) -> str:
        spans: List[Span] = []
        for d in reversed(scan_kind(text, DirectiveKind.COMMAND)):
            result = self._runner.run(d.payload, directory)
            session.report.commands.append(d.payload)
            spans.append(self._admit(d, result.combined(), session, depth))
        return splice(text, spans) if spans else text

    # File imports ----------------------------------------------------------

    def _import_files(self, d: Directive, directory: Path, stack: ImportStack, session: _Session, depth: int) -> str:
        if not self._resolver.is_glob(d.payload):
            target = self._resolver.expand(directory, d.payload)[0]
            self._log.info('%s Loading: %s', LOG_TAG, d.payload)
            return self._load(target, stack, session, depth)

        paths = self._resolver.expand(directory, d.payload)
        session.report.add_glob(d.payload, len(paths))
        if not paths:
            self._log.warning('%s No files matched: %s', LOG_TAG, d.payload)
            return ''
        contents = [self._load(p, stack, session, depth) for p in paths]
        combined = GLOB_JOINER.join(contents)
        estimate = session.budget.estimate(combined)
        self._log.info(
            '%s Expanding %d files (~%s tokens): %s', LOG_TAG, len(paths), f'{estimate.tokens:,}', d.payload
        )
        session.budget.enforce(estimate.chars)
        return combined

    def _load(self, path: Path, stack: ImportStack, session: _Session, depth: int) -> str:
        if path in stack:
            raise CircularImportError([*stack, path])
        content = self._read(path)
        session.report.add_file(path, depth=depth + 1)
        return self._expand(content, path.parent, stack + (path,), session, depth=depth + 1)

    def _read(self, path: Path) -> str:
        try:
            text = path.read_text(encoding='utf-8', errors='ignore')
        except OSError as exc:
            raise ImportReadError(path, exc.strerror or str(exc)) from exc
        trace_io(self._log, 'read', path=str(path), size=len(text))
        return text

    # Helpers ---------------------------------------------------------------

    def _new_budget(self) -> TokenBudget:
        cfg = self.config
        return TokenBudget(
            warn_tokens=cfg.warn_tokens,
            max_tokens=cfg.max_tokens,
            chars_per_token=cfg.chars_per_token,
            force=cfg.force_context,
            logger=self._log,
        )

    @staticmethod
    def _admit(d: Directive, replacement: str, session: _Session, depth: int) -> Span:
        # nested replacements are already part of their enclosing one
        if depth == 0:
            session.budget.admit(len(replacement))
        return (d.start, d.end, replacement)
