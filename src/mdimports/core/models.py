from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Mapping, Optional, Union

from mdimports.constants import CHARS_PER_TOKEN, FORCE_CONTEXT_ENV, MAX_TOKENS, WARN_TOKENS
from mdimports.utils.net import DEFAULT_UA

_TRUTHY = {'1', 'true', 'yes', 'on'}


def env_flag(name: str, env: Optional[Mapping[str, str]] = None) -> bool:
    """Return True when the environment variable *name* holds a truthy value."""
    source = os.environ if env is None else env
    return (source.get(name) or '').strip().lower() in _TRUTHY


class DirectiveKind(str, Enum):
    FILE = 'file'
    URL = 'url'
    COMMAND = 'command'


@dataclass(frozen=True)
class Directive:
    """One directive occurrence in a specific text snapshot.

    `start`/`end` are character offsets into the text that was scanned; they
    are meaningless for any other snapshot.
    """
    kind: DirectiveKind
    payload: str
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Accepted:
    text: str
    kind: Literal['markdown', 'json', 'text']


@dataclass(frozen=True)
class Rejected:
    content_type: Optional[str]
    reason: str


Admission = Union[Accepted, Rejected]


@dataclass(frozen=True)
class FetchRequest:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class FetchResponse:
    status: int
    headers: Mapping[str, str]
    body: bytes
    final_url: str
    reason: str = ''

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


@dataclass(frozen=True)
class CommandResult:
    stdout: str
    stderr: str
    returncode: int

    def combined(self) -> str:
        """Trimmed output with stderr placed before stdout when both exist."""
        out = self.stdout.strip()
        err = self.stderr.strip()
        if out and err:
            return f'{err}\n{out}'
        return out or err or ''


@dataclass(frozen=True)
class ExpansionConfig:
    """Knobs for one top-level expansion call."""
    warn_tokens: int = WARN_TOKENS
    max_tokens: int = MAX_TOKENS
    chars_per_token: int = CHARS_PER_TOKEN
    force_context: bool = False
    fetch_timeout: float = 30.0
    user_agent: str = DEFAULT_UA

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, **overrides) -> 'ExpansionConfig':
        """Build a config whose override flag reflects the process environment."""
        params = {'force_context': env_flag(FORCE_CONTEXT_ENV, env)}
        params.update(overrides)
        return cls(**params)
