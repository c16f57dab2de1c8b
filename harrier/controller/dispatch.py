"""
Controller Dispatch - turns (controller, action name) into router handlers.

A handler has the router-facing signature ``handler(request, response,
args)``. On each call it:

1. injects request/response into controllers that receive them
2. runs the controller's ``init`` hook, if any
3. records controller/action names on responses that support it
4. calls the action with the route arguments and returns its result

Per-invocation state lives in a DispatchContext bound to a ContextVar, so
``forward`` can find the active dispatch and concurrent requests stay
isolated.
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, List, Mapping, Optional, Sequence
import inspect
import logging

from ..config import DispatchConfig
from ..faults import InvalidStateFault
from .actions import ActionTable
from .capabilities import (
    ActionNameRecorder,
    ControllerClassRecorder,
    ControllerNameRecorder,
    Initializable,
    RequestReceiver,
    ResponseReceiver,
)
from .naming import controller_type_name, derive_controller_name


logger = logging.getLogger("harrier.controller.dispatch")

Handler = Callable[..., Awaitable[Any]]


class DispatchState(str, Enum):
    """Lifecycle of one dispatch."""
    CONSTRUCTED = "constructed"
    CONTEXT_INJECTED = "context_injected"
    INITIALIZED = "initialized"
    DISPATCHED = "dispatched"
    FORWARDED = "forwarded"
    COMPLETE = "complete"


@dataclass
class DispatchContext:
    """
    Per-request dispatch record.

    Attributes:
        controller: Controller instance handling the request
        request: Current request
        response: Current response
        action_name: Action currently executing (updated by forwards)
        controller_class: Fully-qualified controller type name
        controller_name: Short controller name, set when it was recorded
        history: Every action entered, in order
        state: Current lifecycle state
        record_metadata: Whether forwards update the response metadata
        context_bound: Request/response were handed to the controller for
            this dispatch (false for minimal handlers)
    """

    controller: Any
    request: Any
    response: Any
    action_name: str
    controller_class: str
    controller_name: Optional[str] = None
    history: List[str] = field(default_factory=list)
    state: DispatchState = DispatchState.CONSTRUCTED
    record_metadata: bool = True
    context_bound: bool = False

    @property
    def forwarded(self) -> bool:
        return len(self.history) > 1


_current_dispatch: ContextVar[Optional[DispatchContext]] = ContextVar(
    "harrier_current_dispatch", default=None
)


def current_dispatch() -> Optional[DispatchContext]:
    """Return the dispatch context of the running handler, if any."""
    return _current_dispatch.get()


async def _safe_call(func: Any, *args, **kwargs) -> Any:
    """Call a sync or async function and return its result."""
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result


async def _invoke_action(method: Callable, args: Any) -> Any:
    if args is None:
        return await _safe_call(method)
    if isinstance(args, Mapping):
        return await _safe_call(method, **args)
    return await _safe_call(method, *args)


class Dispatcher:
    """
    Builds router handlers for the actions of one controller instance.

    Args:
        app: Application handle (required, immutable afterwards)
        controller: Controller instance; any object with public methods
        config: Dispatch configuration; defaults to ``app.config`` when the
            application carries one

    Example:
        dispatcher = Dispatcher(app, ArticlesController(app))
        router.add("GET", "/articles/{id}", dispatcher.create_handler("show"))
    """

    def __init__(self, app: Any, controller: Any, *, config: Optional[DispatchConfig] = None):
        if app is None:
            raise InvalidStateFault("create dispatcher", "an application handle is required")
        if isinstance(controller, type):
            raise TypeError(
                f"Dispatcher needs a controller instance, got class {controller.__name__}; "
                f"use ControllerFactory for per-request construction"
            )

        self._app = app
        self.controller = controller
        self.config = config or getattr(app, "config", None) or DispatchConfig()
        self.actions = ActionTable.for_class(type(controller))

    @property
    def app(self) -> Any:
        return self._app

    def create_handler(self, action_name: str, *, minimal: bool = False) -> Handler:
        """
        Create the router handler for ``action_name``.

        Args:
            action_name: Name of the action method
            minimal: Skip context injection, the init hook and metadata;
                only the action runs

        Returns:
            ``async handler(request, response, args=())``

        Raises:
            MethodNotFoundFault: With ``strict_actions``, if the action is
                not registered on the controller
        """
        if self.config.strict_actions:
            self.actions.require(action_name)

        dispatcher = self

        async def handler(request: Any, response: Any, args: Any = ()) -> Any:
            return await dispatcher.dispatch(
                action_name, request, response, args, minimal=minimal,
            )

        handler.__name__ = action_name
        handler.__qualname__ = f"{type(self.controller).__qualname__}.{action_name}"
        handler.controller = self.controller
        handler.action_name = action_name
        return handler

    async def dispatch(
        self,
        action_name: str,
        request: Any,
        response: Any,
        args: Sequence[Any] | Mapping[str, Any] | None = (),
        *,
        minimal: bool = False,
    ) -> Any:
        """
        Run one full dispatch and return the action's result unchanged.

        Route arguments are passed positionally; a mapping is passed as
        keyword arguments.
        """
        controller = self.controller
        ctx = DispatchContext(
            controller=controller,
            request=request,
            response=response,
            action_name=action_name,
            controller_class=controller_type_name(controller),
            history=[action_name],
            record_metadata=self.config.record_metadata and not minimal,
        )
        token = _current_dispatch.set(ctx)

        try:
            if not minimal:
                self._inject_context(ctx)
                if isinstance(controller, Initializable):
                    await _safe_call(controller.init)
                ctx.state = DispatchState.INITIALIZED
                if ctx.record_metadata:
                    self._record_metadata(ctx)

            method = self.actions.resolve(controller, action_name)
            ctx.state = DispatchState.DISPATCHED
            logger.debug("Dispatching %s.%s", ctx.controller_class, action_name)

            return await _invoke_action(method, args)

        except Exception as e:
            logger.error(
                f"Error dispatching {ctx.controller_class}.{ctx.action_name}: {e}",
                exc_info=True,
            )
            raise

        finally:
            ctx.state = DispatchState.COMPLETE
            _current_dispatch.reset(token)

    def _inject_context(self, ctx: DispatchContext) -> None:
        controller = ctx.controller
        if isinstance(controller, RequestReceiver):
            controller.set_request(ctx.request)
        if isinstance(controller, ResponseReceiver):
            controller.set_response(ctx.response)
        ctx.context_bound = True
        ctx.state = DispatchState.CONTEXT_INJECTED

    def _record_metadata(self, ctx: DispatchContext) -> None:
        response = ctx.response
        if isinstance(response, ControllerNameRecorder):
            ctx.controller_name = derive_controller_name(
                ctx.controller_class, suffix=self.config.controller_suffix,
            )
            response.set_controller_name(ctx.controller_name)
        if isinstance(response, ControllerClassRecorder):
            response.set_controller_class(ctx.controller_class)
        if isinstance(response, ActionNameRecorder):
            response.set_action_name(ctx.action_name)


async def forward(
    action_name: str,
    args: Sequence[Any] | Mapping[str, Any] | None = (),
    *,
    controller: Any = None,
) -> Any:
    """
    Hand the current request to another action of the same controller.

    Context injection and ``init`` are not re-run. The response's recorded
    action name is updated when the response supports it.

    Args:
        action_name: Action to run
        args: Arguments for the action
        controller: Controller expected to be dispatching; defaults to the
            controller of the current dispatch

    Returns:
        The forwarded action's result

    Raises:
        InvalidStateFault: Outside a running action of ``controller``
        MethodNotFoundFault: If the action is not registered
    """
    ctx = _current_dispatch.get()
    if ctx is None:
        raise InvalidStateFault("forward", "no dispatch is in progress")
    if controller is not None and ctx.controller is not controller:
        raise InvalidStateFault("forward", "the controller is not the one being dispatched")
    if ctx.state not in (DispatchState.DISPATCHED, DispatchState.FORWARDED):
        raise InvalidStateFault("forward", f"the dispatch is {ctx.state.value}, no action is running")
    if ctx.response is None:
        raise InvalidStateFault("forward", "no response is bound to the dispatch")

    method = ActionTable.for_class(type(ctx.controller)).resolve(ctx.controller, action_name)

    if ctx.record_metadata and isinstance(ctx.response, ActionNameRecorder):
        ctx.response.set_action_name(action_name)

    logger.debug("Forwarding %s.%s -> %s", ctx.controller_class, ctx.action_name, action_name)
    ctx.action_name = action_name
    ctx.history.append(action_name)
    ctx.state = DispatchState.FORWARDED

    return await _invoke_action(method, args)
