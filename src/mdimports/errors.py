from __future__ import annotations

"""Error taxonomy for import expansion.

Every failure raised by the engine derives from `ImportExpansionError`, so
callers can refuse to continue with a single ``except`` clause. The message
text of each class is stable; downstream code matches on substrings such as
"Circular import detected" or "Import not found".
"""

from pathlib import Path
from typing import Optional, Sequence


class ImportExpansionError(RuntimeError):
    """Base class for fatal expansion failures."""


class CircularImportError(ImportExpansionError):
    """A file already open on the current branch was imported again."""

    def __init__(self, chain: Sequence[Path]) -> None:
        self.chain = tuple(chain)
        super().__init__('Circular import detected: ' + ' -> '.join(str(p) for p in self.chain))


class ImportNotFoundError(ImportExpansionError):
    def __init__(self, payload: str, resolved: Path) -> None:
        self.payload = payload
        self.resolved = resolved
        super().__init__(f'Import not found: {payload} (resolved to {resolved})')


class UnsupportedContentTypeError(ImportExpansionError):
    def __init__(self, url: str, content_type: Optional[str]) -> None:
        self.url = url
        self.content_type = content_type or 'unknown'
        super().__init__(
            f'URL returned unsupported content type: {self.content_type}. '
            f'Only markdown and JSON are allowed. URL: {url}'
        )


class NetworkError(ImportExpansionError):
    """The fetch could not be completed (DNS, connection, non-2xx status)."""

    def __init__(self, url: str, cause: str, *, status: Optional[int] = None) -> None:
        self.url = url
        self.status = status
        super().__init__(f'Failed to fetch URL: {url} - {cause}')


class CommandLaunchError(ImportExpansionError):
    def __init__(self, command: str, cause: str) -> None:
        self.command = command
        super().__init__(f'Command failed: {command} - {cause}')


class TokenBudgetExceededError(ImportExpansionError):
    def __init__(self, tokens: int, limit: int, *, override_env: str) -> None:
        self.tokens = tokens
        self.limit = limit
        super().__init__(
            f'Expanded content is ~{tokens:,} tokens, which exceeds the {limit:,} token limit. '
            f'Narrow the imports or set {override_env}=1 to proceed anyway.'
        )


class ImportReadError(ImportExpansionError):
    """The import target exists but could not be read as a file."""

    def __init__(self, path: Path, cause: str) -> None:
        self.path = path
        super().__init__(f'Could not read import {path}: {cause}')
