from __future__ import annotations
"""
Import path resolution.

A file-import payload is resolved against the directory of the file that
contains it, never against the process working directory:

    @~/notes.md        → $HOME/notes.md
    @/etc/motd         → /etc/motd
    @./part.md         → <importing dir>/part.md
    @../shared/*.md    → sorted matches of <importing dir>/../shared/*.md

Single paths that do not exist raise ImportNotFoundError. Glob payloads
return a (possibly empty) sorted list of regular files, skipping hidden
segments, dependency folders, binary suffixes and anything excluded by the
`.gitignore` files between the glob root and the repository root.
"""

import logging
from pathlib import Path
from typing import List, Optional

from mdimports.core.interfaces.fs import PathResolverProtocol
from mdimports.errors import ImportNotFoundError
from mdimports.logging.helpers import get_logger, trace_io
from mdimports.utils.gitignore import GitIgnoreMatcher
from mdimports.utils.mime import BINARY_SUFFIXES
from mdimports.utils.paths import has_glob_magic, is_ignored_path, split_glob


class ImportPathResolver(PathResolverProtocol):
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('imports.paths')

    def resolve(self, base: Path, payload: str) -> Path:
        """Resolve *payload* against *base*, expanding a leading '~'."""
        pth = Path(payload).expanduser()
        return (pth if pth.is_absolute() else base / pth).resolve()

    def is_glob(self, payload: str) -> bool:
        return has_glob_magic(payload)

    def expand(self, base: Path, payload: str) -> List[Path]:
        """Return the absolute file path(s) a payload refers to."""
        target = self.resolve(base, payload)
        if not self.is_glob(payload):
            if not target.exists():
                raise ImportNotFoundError(payload, target)
            return [target]

        root, pattern = split_glob(target)
        matches: List[Path] = []
        if root.is_dir():
            ignore = GitIgnoreMatcher.for_glob_root(root, base.resolve())
            for fp in root.glob(pattern):
                if not fp.is_file():
                    continue
                if (
                    is_ignored_path(fp.relative_to(root))
                    or fp.suffix.lower() in BINARY_SUFFIXES
                    or ignore.is_ignored(fp)
                ):
                    trace_io(self._log, 'glob skip', path=str(fp))
                    continue
                matches.append(fp.resolve())
        return sorted(set(matches), key=str)
