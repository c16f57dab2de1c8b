"""
Application handle passed to controllers at construction.

Holds the collaborators controllers delegate to: the dependency container,
the view renderer and the dispatch configuration.
"""

from typing import Any, Mapping, Optional

from .config import DispatchConfig
from .faults import DependencyNotFoundFault


class Application:
    """
    Application/context handle.

    Args:
        container: Dependency container. Anything exposing ``resolve(name)``
            or ``get(name)``, or a plain mapping
        view: View renderer (see ``harrier.views.ViewRenderer``)
        config: Dispatch configuration

    Example:
        app = Application(
            container={"articles": ArticleRepository()},
            view=Jinja2View(["templates"]),
        )
    """

    def __init__(
        self,
        container: Optional[Any] = None,
        view: Optional[Any] = None,
        config: Optional[DispatchConfig] = None,
    ):
        self.container = container if container is not None else {}
        self.view = view
        self.config = config or DispatchConfig()

    def get_container(self) -> Any:
        return self.container

    def resolve(self, name: Any) -> Any:
        """
        Look up a dependency by name.

        Raises:
            DependencyNotFoundFault: If the container has no such entry
        """
        container = self.container

        if hasattr(container, "resolve"):
            return container.resolve(name)

        if isinstance(container, Mapping):
            try:
                return container[name]
            except KeyError:
                raise DependencyNotFoundFault(name) from None

        if hasattr(container, "get"):
            value = container.get(name)
            if value is None:
                raise DependencyNotFoundFault(name)
            return value

        raise DependencyNotFoundFault(
            name, f"container {type(container).__name__} supports no lookup",
        )

    def __repr__(self) -> str:
        return (
            f"Application(container={type(self.container).__name__}, "
            f"view={type(self.view).__name__ if self.view else None})"
        )
