"""
Response surfaces consumed and probed by the dispatch core.

DispatchRecordingMixin gives a framework response the optional setters
the dispatcher probes for, so tests can assert which controller and
action produced it.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class RedirectSurface(Protocol):
    """Response able to build a redirect to ``url`` with ``status``."""

    def with_redirect(self, url: str, status: int) -> Any:
        ...


@runtime_checkable
class BodyWriter(Protocol):
    """Response accepting rendered text."""

    def write(self, text: str) -> Any:
        ...


class DispatchRecordingMixin:
    """
    Records dispatch metadata on a response.

    The values are not part of the HTTP response; they exist for
    introspection and testing.
    """

    _controller_name: Optional[str] = None
    _controller_class: Optional[str] = None
    _action_name: Optional[str] = None

    def set_controller_name(self, name: str):
        self._controller_name = name
        return self

    def set_controller_class(self, name: str):
        self._controller_class = name
        return self

    def set_action_name(self, name: str):
        self._action_name = name
        return self

    @property
    def controller_name(self) -> Optional[str]:
        return self._controller_name

    @property
    def controller_class(self) -> Optional[str]:
        return self._controller_class

    @property
    def action_name(self) -> Optional[str]:
        return self._action_name

    def copy_dispatch_metadata(self, other: "DispatchRecordingMixin"):
        """Carry recorded metadata over from another response."""
        self._controller_name = other._controller_name
        self._controller_class = other._controller_class
        self._action_name = other._action_name
        return self
