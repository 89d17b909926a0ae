from __future__ import annotations

from mdimports.constants import CHARS_PER_TOKEN, FORCE_CONTEXT_ENV, MAX_TOKENS, WARN_TOKENS
from mdimports.core.models import (
    Accepted,
    Directive,
    DirectiveKind,
    ExpansionConfig,
    Rejected,
)
from mdimports.errors import (
    CircularImportError,
    CommandLaunchError,
    ImportExpansionError,
    ImportNotFoundError,
    ImportReadError,
    NetworkError,
    TokenBudgetExceededError,
    UnsupportedContentTypeError,
)
from mdimports.parsing.directives import has_imports, scan
from mdimports.rendering.expander import ImportExpander
from mdimports.runtime.sdk import build_expander, expand_file, expand_imports

__version__ = '1.0.0'

__all__ = [
    'CHARS_PER_TOKEN',
    'FORCE_CONTEXT_ENV',
    'MAX_TOKENS',
    'WARN_TOKENS',
    'Accepted',
    'Directive',
    'DirectiveKind',
    'ExpansionConfig',
    'Rejected',
    'CircularImportError',
    'CommandLaunchError',
    'ImportExpansionError',
    'ImportNotFoundError',
    'ImportReadError',
    'NetworkError',
    'TokenBudgetExceededError',
    'UnsupportedContentTypeError',
    'has_imports',
    'scan',
    'ImportExpander',
    'build_expander',
    'expand_file',
    'expand_imports',
]
