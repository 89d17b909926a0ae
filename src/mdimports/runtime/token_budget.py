from __future__ import annotations
"""
Token budget for expanded content.

Sizes are estimated with a fixed characters-per-token ratio. Two limits
apply per top-level expansion call:

- above `warn_tokens` an advisory is logged once ("may be expensive");
- above `max_tokens` TokenBudgetExceededError is raised, unless the
  operator override (MDIMPORTS_FORCE_CONTEXT) is set.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from mdimports.constants import CHARS_PER_TOKEN, FORCE_CONTEXT_ENV, LOG_TAG, MAX_TOKENS, WARN_TOKENS
from mdimports.errors import TokenBudgetExceededError
from mdimports.logging.helpers import get_logger


@dataclass(frozen=True)
class TokenEstimation:
    chars: int
    tokens: int


def estimate_tokens(chars: int, *, chars_per_token: int = CHARS_PER_TOKEN) -> int:
    """Round up so that any non-empty content costs at least one token."""
    if chars <= 0:
        return 0
    return (chars + chars_per_token - 1) // chars_per_token


class TokenBudget:
    def __init__(
        self,
        *,
        warn_tokens: int = WARN_TOKENS,
        max_tokens: int = MAX_TOKENS,
        chars_per_token: int = CHARS_PER_TOKEN,
        force: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._warn = warn_tokens
        self._max = max_tokens
        self._ratio = chars_per_token
        self._force = force
        self._log = logger or get_logger('imports')
        self._warned = False
        self.admitted_chars = 0

    def estimate(self, text: str) -> TokenEstimation:
        return TokenEstimation(chars=len(text), tokens=estimate_tokens(len(text), chars_per_token=self._ratio))

    def admit(self, chars: int) -> None:
        """Add a directive replacement to the running admitted total."""
        self.admitted_chars += chars

    def enforce(self, chars: int) -> int:
        """Check *chars* of content against both limits; return its token estimate."""
        tokens = estimate_tokens(chars, chars_per_token=self._ratio)
        if tokens > self._max and not self._force:
            raise TokenBudgetExceededError(tokens, self._max, override_env=FORCE_CONTEXT_ENV)
        if tokens > self._warn and not self._warned:
            self._warned = True
            self._log.warning(
                '%s Warning: High token count (~%s tokens). This may be expensive.', LOG_TAG, f'{tokens:,}'
            )
        return tokens
