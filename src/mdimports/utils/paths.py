# src/mdimports/utils/paths.py
"""
paths – Small, centralized path helpers for mdimports.

Provides:
  • is_hidden_path(Path)     – dot-segment detection
  • is_ignored_path(Path)    – hidden segments or well-known dependency dirs
  • has_glob_magic(str)      – wildcard detection for import payloads
  • split_glob(Path)         – literal root + relative pattern
"""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

_GLOB_CHARS = frozenset('*?[')

IGNORED_DIR_NAMES = frozenset({'node_modules', '__pycache__'})


def is_hidden_path(p: Path) -> bool:
    """Return True if *p* has any hidden segment (leading-dot component)."""
    return any(part.startswith('.') and part not in ('.', '..') for part in p.parts)


def is_ignored_path(p: Path) -> bool:
    """Return True for paths a glob import should never pick up."""
    return is_hidden_path(p) or any(part in IGNORED_DIR_NAMES for part in p.parts)


def has_glob_magic(s: str) -> bool:
    return any(ch in _GLOB_CHARS for ch in s)


def split_glob(pattern: Path) -> Tuple[Path, str]:
    """Split an absolute glob into its literal directory and the wildcard tail.

    >>> split_glob(Path('/repo/src/**/*.py'))
    (PosixPath('/repo/src'), '**/*.py')
    """
    parts = pattern.parts
    for idx, part in enumerate(parts):
        if has_glob_magic(part):
            return Path(*parts[:idx]), '/'.join(parts[idx:])
    return pattern.parent, pattern.name
