"""
Harrier Testing - Request/response doubles.

Lightweight objects satisfying the request and response surfaces so
controllers can be dispatched without a web framework.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..http.request import CookieAccessMixin
from ..http.response import DispatchRecordingMixin


@dataclass
class StubRequest(CookieAccessMixin):
    """
    In-memory request.

    ``params()`` merges query and body parameters, body values winning.
    """

    method: str = "GET"
    path: str = "/"
    query: Dict[str, Any] = field(default_factory=dict)
    body: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    cookies: Dict[str, str] = field(default_factory=dict)

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        name = name.lower()
        for key, value in self.headers.items():
            if key.lower() == name:
                return value
        return default

    def query_param(self, name: str, default: Any = None) -> Any:
        return self.query.get(name, default)

    def query_params(self) -> Mapping[str, Any]:
        return dict(self.query)

    def params(self) -> Mapping[str, Any]:
        return {**self.query, **self.body}

    def is_xhr(self) -> bool:
        return self.header("x-requested-with") == "XMLHttpRequest"


class RecordingResponse(DispatchRecordingMixin):
    """
    In-memory response recording dispatch metadata.

    ``with_redirect`` returns a new response (the original is left
    untouched) that keeps the recorded metadata.
    """

    def __init__(
        self,
        body: str = "",
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.body = body
        self.status = status
        self.headers: Dict[str, str] = dict(headers or {})

    @property
    def text(self) -> str:
        return self.body

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status < 400

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.headers.get(name.lower(), default)

    def write(self, text: str) -> "RecordingResponse":
        self.body += text
        return self

    def with_status(self, status: int) -> "RecordingResponse":
        clone = RecordingResponse(self.body, status, self.headers)
        return clone.copy_dispatch_metadata(self)

    def with_redirect(self, url: str, status: int = 302) -> "RecordingResponse":
        clone = RecordingResponse("", status, {**self.headers, "location": str(url)})
        return clone.copy_dispatch_metadata(self)

    def __repr__(self) -> str:
        return (
            f"RecordingResponse(status={self.status}, "
            f"controller={self.controller_name!r}, action={self.action_name!r})"
        )
