from __future__ import annotations

"""HTTP transport implementation using urllib.

The transport is minimal and synchronous. It supports:
- Custom User-Agent via constructor.
- Optional SSL context provider callback per request URL.
- Non-2xx answers returned as a FetchResponse instead of raised, so the
  caller decides how to report the status.
"""

import ssl
import urllib.error
import urllib.request
from typing import Callable, Optional

from mdimports.core.interfaces.net import HTTPTransportProtocol
from mdimports.core.models import FetchRequest, FetchResponse


class UrllibHTTPTransport(HTTPTransportProtocol):
    """urllib-based HTTP transport that satisfies HTTPTransportProtocol."""

    def __init__(self, *, user_agent: Optional[str] = None, ssl_ctx_provider: Optional[Callable[[str], Optional[ssl.SSLContext]]] = None) -> None:
        self._ua = user_agent
        self._ssl_ctx_for = ssl_ctx_provider or (lambda _url: None)

    def request(self, req: FetchRequest) -> FetchResponse:
        headers = dict(req.headers or {})
        if self._ua and 'User-Agent' not in headers:
            headers['User-Agent'] = self._ua

        url_req = urllib.request.Request(req.url, data=req.body, headers=headers, method=req.method or 'GET')
        timeout = float(req.timeout) if req.timeout is not None else 30.0
        ctx = self._ssl_ctx_for(req.url)

        try:
            with urllib.request.urlopen(url_req, timeout=timeout, context=ctx) as resp:  # nosec B310 (intended usage)
                return FetchResponse(
                    status=getattr(resp, 'status', None) or int(resp.getcode()),
                    headers=dict(resp.headers.items()),
                    body=resp.read(),
                    final_url=resp.geturl(),
                    reason=getattr(resp, 'reason', '') or '',
                )
        except urllib.error.HTTPError as exc:
            try:
                body = exc.read()
            finally:
                exc.close()
            return FetchResponse(
                status=exc.code,
                headers=dict(exc.headers.items()) if exc.headers else {},
                body=body,
                final_url=exc.geturl() or req.url,
                reason=str(exc.reason or ''),
            )
