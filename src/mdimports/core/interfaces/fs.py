from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, runtime_checkable


@runtime_checkable
class PathResolverProtocol(Protocol):
    def resolve(self, base: Path, payload: str) -> Path:
        ...

    def is_glob(self, payload: str) -> bool:
        ...

    def expand(self, base: Path, payload: str) -> List[Path]:
        ...
