# src/mdimports/utils/gitignore.py
"""
gitignore – `.gitignore` rules applied to glob imports.

Provides:
  • read_gitignore_patterns(dir) – raw patterns of one directory's .gitignore
  • gitignore_scope(start, top)  – directories whose .gitignore files apply
  • GitIgnoreMatcher             – last-match-wins evaluation over a tree

Supported syntax: comments, blank lines, `!` negation, trailing `/` for
directories, leading or inner `/` anchoring, and `*`, `?`, `[...]`, `**`.
A path below an ignored directory stays ignored even if a later rule
negates the file itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Dict, List, Optional

GITIGNORE_NAME = '.gitignore'


@dataclass(frozen=True)
class IgnoreRule:
    base: Path
    pattern: str
    negated: bool = False
    dir_only: bool = False
    anchored: bool = False

    def matches(self, path: Path, *, is_dir: bool) -> bool:
        if self.dir_only and not is_dir:
            return False
        try:
            rel = path.relative_to(self.base)
        except ValueError:
            return False
        if not self.anchored:
            return fnmatchcase(path.name, self.pattern)
        rel_s = rel.as_posix()
        if fnmatchcase(rel_s, self.pattern):
            return True
        return self.pattern.startswith('**/') and fnmatchcase(rel_s, self.pattern[3:])


def read_gitignore_patterns(directory: Path) -> List[str]:
    fp = directory / GITIGNORE_NAME
    if not fp.is_file():
        return []
    try:
        lines = fp.read_text(encoding='utf-8', errors='ignore').splitlines()
    except OSError:
        return []
    return [ln.rstrip() for ln in lines if ln.strip() and not ln.lstrip().startswith('#')]


def parse_rule(base: Path, raw: str) -> Optional[IgnoreRule]:
    pat = raw
    negated = pat.startswith('!')
    if negated:
        pat = pat[1:]
    if pat.startswith('\\'):
        pat = pat[1:]
    dir_only = pat.endswith('/')
    pat = pat.rstrip('/')
    anchored = '/' in pat
    pat = pat.lstrip('/')
    if not pat:
        return None
    return IgnoreRule(base=base, pattern=pat, negated=negated, dir_only=dir_only, anchored=anchored)


def gitignore_scope(start: Path, top: Optional[Path] = None) -> List[Path]:
    """Directories from *start* upwards whose .gitignore files apply.

    The walk stops at the enclosing repository root (a directory holding
    `.git`). Outside a repository it stops at *top* when *top* is an
    ancestor of *start*, otherwise at *start* itself.
    """
    chain = [start, *start.parents]
    for idx, d in enumerate(chain):
        if (d / '.git').exists():
            return chain[: idx + 1]
    if top is not None and top in chain:
        return chain[: chain.index(top) + 1]
    return [start]


class GitIgnoreMatcher:
    """Evaluate .gitignore rules for paths below *top*."""

    def __init__(self, top: Path) -> None:
        self.top = top
        self._cache: Dict[Path, List[IgnoreRule]] = {}

    @classmethod
    def for_glob_root(cls, root: Path, top: Optional[Path] = None) -> 'GitIgnoreMatcher':
        return cls(gitignore_scope(root, top)[-1])

    def _rules(self, directory: Path) -> List[IgnoreRule]:
        if directory not in self._cache:
            parsed = (parse_rule(directory, raw) for raw in read_gitignore_patterns(directory))
            self._cache[directory] = [r for r in parsed if r is not None]
        return self._cache[directory]

    def _dirs_above(self, path: Path) -> List[Path]:
        rel = path.parent.relative_to(self.top)
        dirs = [self.top]
        for part in rel.parts:
            dirs.append(dirs[-1] / part)
        return dirs

    def _decide(self, path: Path, *, is_dir: bool) -> bool:
        ignored = False
        for d in self._dirs_above(path):
            for rule in self._rules(d):
                if rule.matches(path, is_dir=is_dir):
                    ignored = not rule.negated
        return ignored

    def is_ignored(self, path: Path) -> bool:
        try:
            rel = path.relative_to(self.top)
        except ValueError:
            return False
        cur = self.top
        for part in rel.parts[:-1]:
            cur = cur / part
            if self._decide(cur, is_dir=True):
                return True
        return self._decide(path, is_dir=path.is_dir())
