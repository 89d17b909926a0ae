from __future__ import annotations

from typing import Iterable, List, Tuple

Span = Tuple[int, int, str]


def splice(text: str, replacements: Iterable[Span]) -> str:
    """Replace (start, end, new_text) spans of *text* in one fold.

    All offsets refer to *text* as given, so the order in which replacements
    were produced does not matter. Spans must not overlap.
    """
    ordered = sorted(replacements, key=lambda s: s[0], reverse=True)
    pieces: List[str] = []
    cursor = len(text)
    for start, end, new in ordered:
        if end > cursor or start > end:
            raise ValueError(f'overlapping or inverted span ({start}, {end})')
        pieces.append(text[end:cursor])
        pieces.append(new)
        cursor = start
    pieces.append(text[:cursor])
    return ''.join(reversed(pieces))
