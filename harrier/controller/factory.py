"""
Controller Factory

Handles controller instantiation for dispatch.
Supports both per-request and singleton instantiation modes.
"""

from typing import Any, Dict, Type, Union
from enum import Enum
import logging

from ..faults import InvalidStateFault, ScopeViolationFault
from .actions import ActionTable
from .capabilities import is_stateful
from .dispatch import Dispatcher, Handler
from .naming import controller_type_name


class InstantiationMode(str, Enum):
    """Controller instantiation modes."""
    PER_REQUEST = "per_request"
    SINGLETON = "singleton"


class ControllerFactory:
    """
    Factory for creating controller instances and their handlers.

    Controllers are constructed as ``controller_class(app)``.

    Handles:
    - Per-request vs singleton instantiation
    - Scope validation (stateful controllers cannot be singletons)
    - Handler creation bound to the chosen mode
    """

    def __init__(self, app: Any):
        self.app = app
        self.logger = logging.getLogger("harrier.controller.factory")
        self._singletons: Dict[Type, Any] = {}

    def create(
        self,
        controller_class: Type,
        mode: Union[InstantiationMode, str, None] = None,
    ) -> Any:
        """
        Create controller instance.

        Args:
            controller_class: Controller class to instantiate
            mode: Instantiation mode; defaults to the class attribute
                ``instantiation_mode`` or per-request

        Returns:
            Controller instance

        Raises:
            ScopeViolationFault: If a stateful controller is requested as
                a singleton
        """
        mode = self._resolve_mode(controller_class, mode)

        if mode == InstantiationMode.SINGLETON:
            instance = self._singletons.get(controller_class)
            if instance is None:
                self.validate_scope(controller_class, mode)
                instance = controller_class(self.app)
                self._singletons[controller_class] = instance
                self.logger.debug("Created singleton %s", controller_type_name(controller_class))
            return instance

        return controller_class(self.app)

    def create_handler(
        self,
        controller_class: Type,
        action_name: str,
        mode: Union[InstantiationMode, str, None] = None,
        *,
        minimal: bool = False,
    ) -> Handler:
        """
        Create a router handler that obtains its controller per ``mode``.

        Per-request handlers build a fresh controller on every call, so
        stateful controllers never share request/response between
        concurrent requests.

        Raises:
            ScopeViolationFault: If a stateful controller is requested as
                a singleton
            InvalidStateFault: If ``minimal`` is combined with per-request
                construction of a stateful controller; the fresh instance
                would never receive a request or response
            MethodNotFoundFault: With ``strict_actions``, for an unknown
                action
        """
        mode = self._resolve_mode(controller_class, mode)
        self.validate_scope(controller_class, mode)

        if minimal and mode == InstantiationMode.PER_REQUEST and is_stateful(controller_class):
            raise InvalidStateFault(
                "create a minimal handler",
                f"{controller_type_name(controller_class)} is built per request and "
                f"minimal handlers never set its request or response",
            )

        config = getattr(self.app, "config", None)
        if config is None or config.strict_actions:
            ActionTable.for_class(controller_class).require(action_name)

        if mode == InstantiationMode.SINGLETON:
            return Dispatcher(self.app, self.create(controller_class, mode)).create_handler(
                action_name, minimal=minimal,
            )

        factory = self

        async def handler(request: Any, response: Any, args: Any = ()) -> Any:
            controller = factory.create(controller_class, mode)
            return await Dispatcher(factory.app, controller).dispatch(
                action_name, request, response, args, minimal=minimal,
            )

        handler.__name__ = action_name
        handler.__qualname__ = f"{controller_class.__qualname__}.{action_name}"
        handler.controller_class = controller_class
        handler.action_name = action_name
        return handler

    def validate_scope(
        self,
        controller_class: Type,
        mode: Union[InstantiationMode, str],
    ) -> None:
        """
        Validate that controller doesn't violate scope rules.

        Raises:
            ScopeViolationFault: If a singleton controller stores
                request/response context
        """
        if InstantiationMode(mode) != InstantiationMode.SINGLETON:
            return

        if is_stateful(controller_class):
            raise ScopeViolationFault(controller_type_name(controller_class))

    @staticmethod
    def _resolve_mode(
        controller_class: Type,
        mode: Union[InstantiationMode, str, None],
    ) -> InstantiationMode:
        if mode is None:
            mode = getattr(controller_class, "instantiation_mode", InstantiationMode.PER_REQUEST)
        return InstantiationMode(mode)
