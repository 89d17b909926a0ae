from __future__ import annotations
from typing import Protocol, runtime_checkable

from mdimports.core.models import Admission, FetchRequest, FetchResponse


@runtime_checkable
class HTTPTransportProtocol(Protocol):
    def request(self, req: FetchRequest) -> FetchResponse:
        ...


@runtime_checkable
class ContentAdmissionPolicyProtocol(Protocol):
    """Decides whether a fetched body may enter the document."""

    def admit(self, url: str, content_type: str | None, body: str) -> Admission:
        ...


@runtime_checkable
class RemoteContentGateProtocol(Protocol):
    def fetch(self, url: str) -> Admission:
        ...
