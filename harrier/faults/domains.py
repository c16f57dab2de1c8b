"""
Harrier Faults - Domain-specific fault types.

Provides concrete fault classes for each domain:
- CONFIG faults
- DISPATCH faults
- DI faults

Dispatch faults also derive from the builtin exception a caller would
naturally catch (``AttributeError`` for a missing action, ``ValueError``
for a malformed controller name, ``RuntimeError`` for a bad lifecycle
state), so routers that only know builtin exceptions still handle them.
"""

from typing import Any, Iterable, Optional
from .core import Fault, FaultDomain, Severity


# ============================================================================
# CONFIG Faults
# ============================================================================

class ConfigFault(Fault):
    """Base class for configuration faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.CONFIG,
            severity=severity,
            metadata=metadata,
        )


class ConfigInvalidFault(ConfigFault):
    """Configuration value is invalid."""

    def __init__(self, key: str, reason: str, **kwargs):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Configuration key '{key}' is invalid: {reason}",
            metadata={"key": key, "reason": reason, **kwargs.get("metadata", {})},
        )


# ============================================================================
# DISPATCH Faults
# ============================================================================

class DispatchFault(Fault):
    """Base class for controller dispatch faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.ERROR,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.DISPATCH,
            severity=severity,
            metadata=metadata,
        )


class MethodNotFoundFault(DispatchFault, AttributeError):
    """Action name does not resolve to an action of the controller."""

    def __init__(
        self,
        controller_class: str,
        action_name: str,
        available: Iterable[str] = (),
        **kwargs,
    ):
        self.controller_class = controller_class
        self.action_name = action_name
        available = sorted(available)
        message = f"Controller '{controller_class}' has no action '{action_name}'"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(
            code="METHOD_NOT_FOUND",
            message=message,
            metadata={
                "controller_class": controller_class,
                "action": action_name,
                "available": available,
                **kwargs.get("metadata", {}),
            },
        )


class NamingConventionFault(DispatchFault, ValueError):
    """Controller type name does not end with the controller suffix."""

    def __init__(self, type_name: str, suffix: str, **kwargs):
        self.type_name = type_name
        self.suffix = suffix
        super().__init__(
            code="NAMING_CONVENTION_VIOLATION",
            message=(
                f"Controller type '{type_name}' must be named '<Name>{suffix.capitalize()}' "
                f"to derive a controller name"
            ),
            metadata={"type_name": type_name, "suffix": suffix, **kwargs.get("metadata", {})},
        )


class InvalidStateFault(DispatchFault, RuntimeError):
    """Operation requires a dispatch state that is not established."""

    def __init__(self, operation: str, reason: str, **kwargs):
        self.operation = operation
        super().__init__(
            code="INVALID_DISPATCH_STATE",
            message=f"Cannot {operation}: {reason}",
            metadata={"operation": operation, "reason": reason, **kwargs.get("metadata", {})},
        )


class ScopeViolationFault(DispatchFault):
    """A stateful controller was requested with singleton instantiation."""

    def __init__(self, controller_class: str, **kwargs):
        self.controller_class = controller_class
        super().__init__(
            code="SCOPE_VIOLATION",
            message=(
                f"Singleton controller '{controller_class}' stores request/response "
                f"context and must be instantiated per request"
            ),
            metadata={"controller_class": controller_class, **kwargs.get("metadata", {})},
        )


# ============================================================================
# DI Faults
# ============================================================================

class DIFault(Fault):
    """Base class for dependency lookup faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.ERROR,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.DI,
            severity=severity,
            metadata=metadata,
        )


class DependencyNotFoundFault(DIFault, LookupError):
    """No dependency is registered under the requested name."""

    def __init__(self, name: Any, reason: str = "not registered", **kwargs):
        self.name = name
        super().__init__(
            code="DEPENDENCY_NOT_FOUND",
            message=f"Dependency '{name}' could not be resolved: {reason}",
            metadata={"name": str(name), "reason": reason, **kwargs.get("metadata", {})},
        )
