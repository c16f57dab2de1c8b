"""
Harrier Faults - typed fault signals raised by the dispatch core.

The dispatch core performs no recovery of its own: every fault propagates
to the router that invoked the handler, which decides how to translate it
into an HTTP failure response.

Core exports:
- Fault: Base fault class
- FaultDomain: Domain enumeration
- Severity: Severity levels
- Dispatch, config and DI fault types
"""

from .core import (
    Fault,
    FaultDomain,
    Severity,
    DOMAIN_SEVERITY,
)

from .domains import (
    ConfigFault,
    ConfigInvalidFault,
    DispatchFault,
    MethodNotFoundFault,
    NamingConventionFault,
    InvalidStateFault,
    ScopeViolationFault,
    DIFault,
    DependencyNotFoundFault,
)

__all__ = [
    # Core types
    "Fault",
    "FaultDomain",
    "Severity",
    "DOMAIN_SEVERITY",

    # Config
    "ConfigFault",
    "ConfigInvalidFault",

    # Dispatch
    "DispatchFault",
    "MethodNotFoundFault",
    "NamingConventionFault",
    "InvalidStateFault",
    "ScopeViolationFault",

    # DI
    "DIFault",
    "DependencyNotFoundFault",
]
