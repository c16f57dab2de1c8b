"""
HTTP surfaces used by controllers.

Protocols for the request/response capabilities the controller helpers
call, plus mixins that add them to a framework's own classes.
"""

from .request import RequestSurface, CookieAccessMixin
from .response import RedirectSurface, BodyWriter, DispatchRecordingMixin

__all__ = [
    "RequestSurface",
    "CookieAccessMixin",
    "RedirectSurface",
    "BodyWriter",
    "DispatchRecordingMixin",
]
