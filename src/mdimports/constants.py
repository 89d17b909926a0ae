from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Token estimation ratio. Tests import it as `mdimports.CHARS_PER_TOKEN`.
CHARS_PER_TOKEN: int = 4

# Advisory threshold: above it the operator is told the run may be expensive.
WARN_TOKENS: int = 50_000

# Hard threshold: above it expansion fails unless the override is set.
MAX_TOKENS: int = 100_000

# Environment flag that disables the hard token limit.
FORCE_CONTEXT_ENV: str = 'MDIMPORTS_FORCE_CONTEXT'

# Tag prefixed to every diagnostic line emitted by the import engine.
LOG_TAG: str = '[imports]'
