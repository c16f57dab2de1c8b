"""
Controller Base Class

Provides the base Controller: a context carrier for the current request
and response, dispatch of its actions, and shorthand helpers that
delegate to the application's collaborators.
"""

from typing import Any, Dict, Mapping, Optional, Sequence, TYPE_CHECKING
import inspect

from ..config import DispatchConfig
from ..faults import InvalidStateFault
from .dispatch import DispatchContext, Dispatcher, Handler, current_dispatch, forward

if TYPE_CHECKING:
    from ..app import Application


class Controller:
    """
    Base Controller class.

    Actions are the public methods of a subclass, sync or async. Route
    arguments arrive as positional parameters; the current request and
    response are available as ``self.request`` / ``self.response``.

    While one of its actions is being dispatched, ``request`` and
    ``response`` come from that dispatch's context, so a single instance
    registered for a route serves concurrent requests without one
    request seeing another's. Outside a dispatch they hold the values last
    set.

    Class Attributes:
        instantiation_mode: "per_request" (default) or "singleton".
            ControllerFactory refuses singleton mode for controllers
            deriving from this class

    Optional hook:
        init(self): called on every dispatch after request/response are
            set and before the action runs

    Example:
        class ArticlesController(Controller):
            async def init(self):
                self.articles = self.get("articles")

            async def show(self, article_id):
                article = self.articles.find(article_id)
                return await self.render("articles/show.html", {"article": article})

        app = Application(container=..., view=Jinja2View(["templates"]))
        router.get("/articles/{id}", ArticlesController(app)("show"))
    """

    _controller_base = True

    instantiation_mode: str = "per_request"

    def __init__(self, app: "Application"):
        self.app = app
        self._request: Any = None
        self._response: Any = None

    def __call__(self, action_name: str, *, minimal: bool = False) -> Handler:
        """Return the router handler for ``action_name``."""
        return Dispatcher(self.app, self).create_handler(action_name, minimal=minimal)

    @property
    def config(self) -> DispatchConfig:
        return getattr(self.app, "config", None) or DispatchConfig()

    # Context carrier

    @property
    def request(self) -> Any:
        ctx = self._dispatch_context()
        return ctx.request if ctx is not None else self._request

    @request.setter
    def request(self, request: Any) -> None:
        self.set_request(request)

    @property
    def response(self) -> Any:
        ctx = self._dispatch_context()
        return ctx.response if ctx is not None else self._response

    @response.setter
    def response(self, response: Any) -> None:
        self.set_response(response)

    def set_request(self, request: Any) -> "Controller":
        """Set the current request."""
        self._request = request
        ctx = self._dispatch_context()
        if ctx is not None:
            ctx.request = request
        return self

    def set_response(self, response: Any) -> "Controller":
        """Set the current response."""
        self._response = response
        ctx = self._dispatch_context()
        if ctx is not None:
            ctx.response = response
        return self

    def _dispatch_context(self) -> Optional[DispatchContext]:
        ctx = current_dispatch()
        if ctx is not None and ctx.controller is self and ctx.context_bound:
            return ctx
        return None

    # Forwarding

    async def forward(
        self,
        action_name: str,
        args: Sequence[Any] | Mapping[str, Any] | None = (),
    ) -> Any:
        """
        Pass control to another action of this controller.

        The response's recorded action name is updated; request/response
        injection and ``init`` do not run again.

        Raises:
            InvalidStateFault: If called outside an action of this controller
            MethodNotFoundFault: If the action does not exist
        """
        return await forward(action_name, args, controller=self)

    # Helpers

    async def render(self, template: str, variables: Optional[Dict[str, Any]] = None) -> Any:
        """
        Render a view into the current response.

        Args:
            template: Template name
            variables: Template variables

        Returns:
            The response returned by the view renderer
        """
        view = getattr(self.app, "view", None)
        if view is None:
            raise InvalidStateFault("render", "the application has no view renderer")

        result = view.render(self._require_response("render"), template, variables or {})
        if inspect.isawaitable(result):
            result = await result
        return result

    def is_xhr(self) -> bool:
        """True if the current request was made with XMLHttpRequest."""
        return bool(self._require_request("check for XHR").is_xhr())

    def get_post(self) -> Dict[str, Any]:
        """Request body parameters, without the ``_METHOD`` override field."""
        params = self._require_request("read POST parameters").params()
        return {key: value for key, value in params.items() if key != "_METHOD"}

    def get_query_param(self, name: str, default: Any = None) -> Any:
        return self._require_request("read query parameters").query_param(name, default)

    def get_query_params(self) -> Dict[str, Any]:
        return dict(self._require_request("read query parameters").query_params())

    def get_cookie(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._require_request("read cookies").cookie(name, default)

    def get(self, name: Any) -> Any:
        """Shorthand to look up a dependency from the application container."""
        return self.app.resolve(name)

    def redirect(self, url: str, status: Optional[int] = None) -> Any:
        """
        Build a redirect response from the current response.

        Args:
            url: Redirect destination
            status: HTTP status code; defaults to ``config.redirect_status``
        """
        response = self._require_response("redirect")
        return response.with_redirect(url, status or self.config.redirect_status)

    def _require_request(self, operation: str) -> Any:
        if self.request is None:
            raise InvalidStateFault(operation, "no request is set on the controller")
        return self.request

    def _require_response(self, operation: str) -> Any:
        if self.response is None:
            raise InvalidStateFault(operation, "no response is set on the controller")
        return self.response
