"""
Harrier Testing - helpers for dispatching controllers in tests.

Usage:
    from harrier.testing import StubRequest, RecordingResponse, assert_dispatched

    async def test_show():
        handler = ArticlesController(app)("show")
        response = await handler(StubRequest(), RecordingResponse(), [42])
        assert_dispatched(response, controller="articles", action="show")

Components:
    - StubRequest:         In-memory request satisfying RequestSurface
    - RecordingResponse:   In-memory response recording dispatch metadata
    - DispatchAssertions:  Assertion mixin for test case classes
"""

from .doubles import StubRequest, RecordingResponse
from .assertions import (
    DispatchAssertions,
    assert_dispatched,
    assert_not_dispatched,
    assert_redirect,
)

__all__ = [
    "StubRequest",
    "RecordingResponse",
    "DispatchAssertions",
    "assert_dispatched",
    "assert_not_dispatched",
    "assert_redirect",
]
