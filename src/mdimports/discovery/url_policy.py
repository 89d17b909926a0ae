from __future__ import annotations
"""
Admission policy for remote content.

A fetched body may enter the document only when it is clearly textual:

1. The Content-Type base type is in TEXT_CONTENT_TYPES → accepted verbatim.
2. Otherwise the type is inferred: a JSON object/array body, a URL path
   ending in a markdown or JSON extension, or markdown-looking text
   (heading, list item at line start, fenced code block).
3. Anything else is rejected, so plain HTML and binary payloads do not pass.

The decision is returned as `Accepted` / `Rejected`; raising is left to the
caller.
"""

import json
from typing import Literal, Optional
from urllib.parse import urlparse

from mdimports.core.interfaces.net import ContentAdmissionPolicyProtocol
from mdimports.core.models import Accepted, Admission, Rejected
from mdimports.utils.mime import base_mime, extract_ext_from_url_path

TEXT_CONTENT_TYPES = frozenset({
    'text/markdown',
    'text/x-markdown',
    'text/plain',
    'application/json',
    'application/x-json',
    'text/json',
})

_MARKDOWN_EXT = {'.md', '.markdown'}
_JSON_EXT = {'.json'}

Inferred = Literal['markdown', 'json', 'unknown']


def _kind_for_type(ctype: str) -> Literal['markdown', 'json', 'text']:
    if 'json' in ctype:
        return 'json'
    if 'markdown' in ctype:
        return 'markdown'
    return 'text'


def _looks_like_json(text: str) -> bool:
    if not ((text.startswith('{') and text.endswith('}')) or (text.startswith('[') and text.endswith(']'))):
        return False
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def _looks_like_markdown(text: str) -> bool:
    if text.startswith('#') or '\n#' in text:
        return True
    if text.startswith(('- ', '* ')) or '\n- ' in text or '\n* ' in text:
        return True
    return '```' in text


class DefaultContentAdmissionPolicy(ContentAdmissionPolicyProtocol):
    def infer(self, url: str, body: str) -> Inferred:
        trimmed = body.strip()
        if _looks_like_json(trimmed):
            return 'json'
        ext = extract_ext_from_url_path(urlparse(url).path)
        if ext in _MARKDOWN_EXT:
            return 'markdown'
        if ext in _JSON_EXT:
            return 'json'
        if _looks_like_markdown(trimmed):
            return 'markdown'
        return 'unknown'

    def admit(self, url: str, content_type: Optional[str], body: str) -> Admission:
        ctype = base_mime(content_type)
        if ctype in TEXT_CONTENT_TYPES:
            return Accepted(text=body.strip(), kind=_kind_for_type(ctype))

        inferred = self.infer(url, body)
        if inferred != 'unknown':
            return Accepted(text=body.strip(), kind=inferred)
        return Rejected(content_type=ctype or None, reason='content is neither markdown nor JSON')
