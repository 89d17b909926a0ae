from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from mdimports.core.models import FetchRequest, FetchResponse


def write(root: Path, rel: str, content: str) -> Path:
    """Create *rel* under *root* (parents included) and return its path."""
    fp = root / rel
    fp.parent.mkdir(parents=True, exist_ok=True)
    fp.write_text(content, encoding="utf-8")
    return fp


def response(body: str | bytes, content_type: Optional[str] = None, *, status: int = 200, url: str = "") -> FetchResponse:
    headers = {"Content-Type": content_type} if content_type else {}
    data = body.encode("utf-8") if isinstance(body, str) else body
    return FetchResponse(status=status, headers=headers, body=data, final_url=url, reason="OK" if status == 200 else "Not Found")


class FakeTransport:
    """HTTPTransportProtocol double serving canned responses by URL."""

    def __init__(self, routes: Dict[str, FetchResponse | Exception]) -> None:
        self._routes = routes
        self.requests: List[FetchRequest] = []

    def request(self, req: FetchRequest) -> FetchResponse:
        self.requests.append(req)
        answer = self._routes[req.url]
        if isinstance(answer, Exception):
            raise answer
        return answer
