"""
Harrier - class-based controller dispatch for Python routers.

Turns controller methods into router handlers with request/response
injection, an optional ``init`` hook, dispatch metadata for tests and
in-request forwarding between actions.
"""

__version__ = "0.1.0"

from .app import Application
from .config import ConfigLoader, DispatchConfig
from .controller import (
    ActionTable,
    Controller,
    ControllerFactory,
    DispatchContext,
    Dispatcher,
    DispatchState,
    InstantiationMode,
    current_dispatch,
    controller_type_name,
    derive_controller_name,
    forward,
)
from .faults import (
    DependencyNotFoundFault,
    DispatchFault,
    Fault,
    InvalidStateFault,
    MethodNotFoundFault,
    NamingConventionFault,
    ScopeViolationFault,
)
from .views import Jinja2View, ViewRenderer

__all__ = [
    "__version__",
    "Application",
    "ConfigLoader",
    "DispatchConfig",
    "ActionTable",
    "Controller",
    "ControllerFactory",
    "DispatchContext",
    "Dispatcher",
    "DispatchState",
    "InstantiationMode",
    "current_dispatch",
    "controller_type_name",
    "derive_controller_name",
    "forward",
    "DependencyNotFoundFault",
    "DispatchFault",
    "Fault",
    "InvalidStateFault",
    "MethodNotFoundFault",
    "NamingConventionFault",
    "ScopeViolationFault",
    "Jinja2View",
    "ViewRenderer",
]
