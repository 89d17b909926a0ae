from __future__ import annotations
"""
Remote content gate for `@http(s)://` imports.

`RemoteContentGate.fetch` downloads one URL and runs the admission policy
on the decoded body. Transport failures and non-2xx statuses raise
NetworkError; the admission outcome itself is returned as a value.
"""
import http.client
import logging
import ssl
from typing import Callable, Optional

from mdimports.constants import LOG_TAG
from mdimports.core.interfaces.net import (
    ContentAdmissionPolicyProtocol,
    HTTPTransportProtocol,
    RemoteContentGateProtocol,
)
from mdimports.core.models import Admission, FetchRequest
from mdimports.discovery.url_policy import DefaultContentAdmissionPolicy
from mdimports.errors import NetworkError
from mdimports.logging.helpers import get_logger, trace_io
from mdimports.net.urllib_transport import UrllibHTTPTransport
from mdimports.utils.mime import charset_of
from mdimports.utils.net import DEFAULT_ACCEPT, DEFAULT_UA


class RemoteContentGate(RemoteContentGateProtocol):
    def __init__(
        self,
        *,
        logger: Optional[logging.Logger] = None,
        user_agent: str = DEFAULT_UA,
        timeout: float = 30.0,
        ssl_ctx_provider: Optional[Callable[[str], Optional[ssl.SSLContext]]] = None,
        transport: Optional[HTTPTransportProtocol] = None,
        policy: Optional[ContentAdmissionPolicyProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('imports')
        self._ua = user_agent
        self._timeout = timeout
        self._http: HTTPTransportProtocol = transport or UrllibHTTPTransport(
            user_agent=self._ua, ssl_ctx_provider=ssl_ctx_provider
        )
        self._policy: ContentAdmissionPolicyProtocol = policy or DefaultContentAdmissionPolicy()

    def fetch(self, url: str) -> Admission:
        self._log.info('%s Fetching: %s', LOG_TAG, url)
        req = FetchRequest(
            method='GET',
            url=url,
            headers={'Accept': DEFAULT_ACCEPT, 'User-Agent': self._ua},
            timeout=self._timeout,
        )
        try:
            resp = self._http.request(req)
        except (OSError, http.client.HTTPException, ValueError) as exc:
            # URLError, socket timeouts and connection resets are all OSError.
            raise NetworkError(url, str(getattr(exc, 'reason', None) or exc)) from exc

        if not resp.ok:
            raise NetworkError(url, f'HTTP {resp.status}: {resp.reason}'.rstrip(': '), status=resp.status)

        ctype = resp.header('Content-Type')
        try:
            body = resp.body.decode(charset_of(ctype), errors='replace')
        except LookupError:
            body = resp.body.decode('utf-8', errors='replace')
        trace_io(self._log, 'fetched', url=url, status=resp.status, content_type=ctype, size=len(resp.body))
        return self._policy.admit(url, ctype, body)
