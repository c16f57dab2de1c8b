"""
Harrier Faults - Core types and fault taxonomy.

Defines:
- Fault base class (structured fault objects)
- FaultDomain (explicit fault domains)
- Severity levels
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


# ============================================================================
# Severity & Domain
# ============================================================================

class Severity(str, Enum):
    """
    Fault severity levels.

    Determines the logging level a router should use when it translates
    the fault into a failure response.
    """
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"


class FaultDomain:
    """
    Fault domains (taxonomy).

    Identifies the functional area where a fault occurred.
    """

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.value = name
        self.description = description

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"FaultDomain(name='{self.name}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, FaultDomain):
            return self.name == other.name
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(self.name)


# Standard Domains
FaultDomain.CONFIG = FaultDomain("config", "Configuration errors")
FaultDomain.DISPATCH = FaultDomain("dispatch", "Controller action dispatch errors")
FaultDomain.DI = FaultDomain("di", "Dependency lookup errors")


# Severity used when a fault does not pass one explicitly.
DOMAIN_SEVERITY = {
    FaultDomain.CONFIG: Severity.FATAL,
    FaultDomain.DISPATCH: Severity.ERROR,
    FaultDomain.DI: Severity.ERROR,
}


# ============================================================================
# Fault - Base Class
# ============================================================================

class Fault(Exception):
    """
    Structured error raised by Harrier.

    ``code`` is stable and meant for routers that map faults onto failure
    responses, ``message`` is meant for people reading logs. ``metadata``
    holds the values the message was built from (action name, config key,
    ...). Subclasses may declare ``code`` or ``domain`` as class
    attributes instead of passing them.

    Example:
        raise Fault(
            code="ACTION_DISABLED",
            message="Action 'export' is disabled",
            domain=FaultDomain.DISPATCH,
        )
    """

    code: Optional[str] = None
    message: Optional[str] = None
    domain: Optional[FaultDomain] = None

    def __init__(
        self,
        code: str | None = None,
        message: str | None = None,
        *,
        domain: FaultDomain | None = None,
        severity: Optional[Severity] = None,
        metadata: Optional[dict[str, Any]] = None,
    ):
        self.code = code or self.code
        self.message = message or self.message
        self.domain = domain or self.domain
        if not (self.code and self.message and self.domain):
            raise TypeError(f"{type(self).__name__} needs a code, a message and a domain")

        super().__init__(self.message)
        self.severity = severity or DOMAIN_SEVERITY.get(self.domain, Severity.ERROR)
        self.metadata = dict(metadata or {})

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, domain={self.domain}, severity={self.severity.value})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form, for structured log records."""
        return {
            "code": self.code,
            "message": self.message,
            "domain": str(self.domain),
            "severity": self.severity.value,
            "metadata": dict(self.metadata),
        }
