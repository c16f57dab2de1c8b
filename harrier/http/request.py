"""
Request surface consumed by controller helpers.

Harrier does not parse HTTP. The surrounding framework's request object
only needs to provide the accessors in RequestSurface; CookieAccessMixin
adds the cookie-with-default accessor to requests that expose their
cookies as a mapping.
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class RequestSurface(Protocol):
    """Accessors the controller helpers call on a request."""

    def query_param(self, name: str, default: Any = None) -> Any:
        ...

    def query_params(self) -> Mapping[str, Any]:
        ...

    def params(self) -> Mapping[str, Any]:
        ...

    def is_xhr(self) -> bool:
        ...

    def cookie(self, name: str, default: Optional[str] = None) -> Optional[str]:
        ...


class CookieAccessMixin:
    """
    Cookie lookup with a default value.

    Expects the host class to expose ``cookies`` as a mapping (attribute
    or property).
    """

    def cookie(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a cookie, or ``default`` if not set.

        Args:
            name: Name of the cookie
            default: Value returned when the cookie is absent
        """
        cookies = getattr(self, "cookies", None) or {}
        return cookies.get(name, default)
