from __future__ import annotations

"""Directive scanner.

Three directive forms are recognized in a document body:

    @./relative.md  @../up.md  @/abs/path.md  @~/home.md   file import
    @https://host/doc.md  @http://host/data.json          URL import
    !`command arg1 arg2`                                  command inline

A file or URL payload runs until the next whitespace character. A bare
``user@example.com`` never matches because the ``@`` must be followed by a
path prefix or an http(s) scheme.

`scan` is a pure function: it compiles nothing per call, keeps no cursor
between calls and returns a fresh list each time.
"""

import re
from typing import Dict, Iterable, List, Optional

from mdimports.core.models import Directive, DirectiveKind

_PATTERNS: Dict[DirectiveKind, re.Pattern[str]] = {
    DirectiveKind.FILE: re.compile(r'@((?:~/|\.\.?/|/)\S+)'),
    DirectiveKind.URL: re.compile(r'@(https?://\S+)'),
    DirectiveKind.COMMAND: re.compile(r'!`([^`]+)`'),
}


def scan(text: str, kinds: Optional[Iterable[DirectiveKind]] = None) -> List[Directive]:
    """Return every directive of the requested kinds, ordered by offset."""
    wanted = list(kinds) if kinds is not None else list(DirectiveKind)
    found: List[Directive] = []
    for kind in wanted:
        for m in _PATTERNS[kind].finditer(text):
            found.append(Directive(kind=kind, payload=m.group(1), start=m.start(), end=m.end()))
    found.sort(key=lambda d: d.start)
    return found


def scan_kind(text: str, kind: DirectiveKind) -> List[Directive]:
    return scan(text, (kind,))


def has_imports(text: str) -> bool:
    """True if *text* contains at least one directive of any kind."""
    return any(p.search(text) for p in _PATTERNS.values())
