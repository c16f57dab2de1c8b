"""
Capability Protocols

Narrow, optional surfaces the dispatcher probes at invocation time.
A controller or response implements any subset of them; absence of a
capability is a normal case and is skipped silently.
"""

from typing import Any, Protocol, runtime_checkable


# ============================================================================
# Controller capabilities
# ============================================================================

@runtime_checkable
class RequestReceiver(Protocol):
    """Controller that stores the current request."""

    def set_request(self, request: Any) -> Any:
        ...


@runtime_checkable
class ResponseReceiver(Protocol):
    """Controller that stores the current response."""

    def set_response(self, response: Any) -> Any:
        ...


@runtime_checkable
class Initializable(Protocol):
    """Controller with a per-invocation ``init`` hook (sync or async)."""

    def init(self) -> Any:
        ...


# ============================================================================
# Response capabilities
# ============================================================================

@runtime_checkable
class ControllerNameRecorder(Protocol):
    """Response that records the short controller name."""

    def set_controller_name(self, name: str) -> Any:
        ...


@runtime_checkable
class ControllerClassRecorder(Protocol):
    """Response that records the fully-qualified controller type name."""

    def set_controller_class(self, name: str) -> Any:
        ...


@runtime_checkable
class ActionNameRecorder(Protocol):
    """Response that records the dispatched action name."""

    def set_action_name(self, name: str) -> Any:
        ...


def is_stateful(controller: Any) -> bool:
    """True if the controller (instance or class) carries request/response context."""
    if isinstance(controller, type):
        return callable(getattr(controller, "set_request", None)) or callable(
            getattr(controller, "set_response", None)
        )
    return isinstance(controller, (RequestReceiver, ResponseReceiver))
