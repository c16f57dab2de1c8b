"""
Harrier Controller System

Class-based controllers as router handlers.

Key Features:
- Any controller method becomes a handler: ``controller("action")``
- Capability-probed context injection, ``init`` hook and dispatch metadata
- In-request ``forward`` between actions of the same controller
- Per-request or singleton construction via ControllerFactory

Example:
    from harrier import Application, Controller

    class ArticlesController(Controller):
        async def show(self, article_id):
            return await self.render("articles/show.html", {"id": article_id})

        async def latest(self):
            return await self.forward("show", [1])

    handler = ArticlesController(Application())("show")
    response = await handler(request, response, [42])
"""

from .base import Controller
from .actions import ActionTable, RESERVED_NAMES
from .capabilities import (
    RequestReceiver,
    ResponseReceiver,
    Initializable,
    ControllerNameRecorder,
    ControllerClassRecorder,
    ActionNameRecorder,
    is_stateful,
)
from .dispatch import (
    Dispatcher,
    DispatchContext,
    DispatchState,
    Handler,
    current_dispatch,
    forward,
)
from .factory import ControllerFactory, InstantiationMode
from .naming import controller_type_name, derive_controller_name

__all__ = [
    # Base
    "Controller",

    # Actions
    "ActionTable",
    "RESERVED_NAMES",

    # Capabilities
    "RequestReceiver",
    "ResponseReceiver",
    "Initializable",
    "ControllerNameRecorder",
    "ControllerClassRecorder",
    "ActionNameRecorder",
    "is_stateful",

    # Dispatch
    "Dispatcher",
    "DispatchContext",
    "DispatchState",
    "Handler",
    "current_dispatch",
    "forward",

    # Factory
    "ControllerFactory",
    "InstantiationMode",

    # Naming
    "controller_type_name",
    "derive_controller_name",
]
