from __future__ import annotations

import re
from typing import Optional

_EXT_RE = re.compile(r'\.[A-Za-z0-9_-]{1,8}$')

# Suffixes a glob import skips without reading.
BINARY_SUFFIXES = frozenset({
    '.png', '.jpg', '.jpeg', '.gif', '.webp', '.bmp', '.ico', '.tiff', '.avif',
    '.mp4', '.m4v', '.mov', '.webm', '.ogv', '.flv', '.mp3', '.ogg', '.oga',
    '.wav', '.flac', '.woff', '.woff2', '.ttf', '.otf', '.eot', '.pdf',
    '.doc', '.docx', '.ppt', '.pptx', '.xls', '.xlsx', '.zip', '.tar', '.gz',
    '.tgz', '.bz2', '.xz', '.7z', '.pyc', '.pyo', '.so', '.dylib', '.dll', '.exe',
})


def extract_ext_from_url_path(url_path: str) -> str:
    m = _EXT_RE.search(url_path or '')
    return m.group(0).lower() if m else ''


def base_mime(content_type: Optional[str]) -> str:
    """'text/markdown; charset=utf-8' → 'text/markdown'."""
    return (content_type or '').split(';', 1)[0].strip().lower()


def charset_of(content_type: Optional[str], default: str = 'utf-8') -> str:
    for param in (content_type or '').split(';')[1:]:
        key, _, value = param.partition('=')
        if key.strip().lower() == 'charset' and value.strip():
            return value.strip().strip('"\'')
    return default
