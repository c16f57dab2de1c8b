"""
View rendering for controllers.

ViewRenderer is the collaborator contract ``Controller.render`` calls:
render a template keyed by name with a variable mapping into a response.
Jinja2View implements it on top of an async Jinja2 environment.
"""

from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Protocol, Union, runtime_checkable
from pathlib import Path
import logging

from jinja2 import BaseLoader, Environment, FileSystemLoader, select_autoescape

from .http.response import BodyWriter


logger = logging.getLogger("harrier.views")


@runtime_checkable
class ViewRenderer(Protocol):
    """Renders ``template`` with ``variables`` into ``response``."""

    def render(self, response: Any, template: str, variables: Mapping[str, Any]) -> Any:
        ...


class Jinja2View:
    """
    Jinja2-backed view renderer.

    Args:
        search_paths: Template directories (used when no loader or
            environment is given)
        loader: Jinja2 loader
        environment: Pre-built Jinja2 environment; must have
            ``enable_async=True``
        autoescape: Enable HTML autoescaping
        globals: Custom global variables/functions
        filters: Custom filters

    Example:
        view = Jinja2View(["templates"])
        response = await view.render(response, "articles/show.html", {"article": article})
    """

    def __init__(
        self,
        search_paths: Optional[Iterable[Union[str, Path]]] = None,
        *,
        loader: Optional[BaseLoader] = None,
        environment: Optional[Environment] = None,
        autoescape: bool = True,
        globals: Optional[Dict[str, Any]] = None,
        filters: Optional[Dict[str, Callable]] = None,
    ):
        if environment is None:
            if loader is None:
                loader = FileSystemLoader([str(p) for p in (search_paths or ["templates"])])
            environment = Environment(
                loader=loader,
                autoescape=select_autoescape(
                    enabled_extensions=["html", "htm", "xml"],
                    default_for_string=True,
                ) if autoescape else False,
                enable_async=True,
            )
        elif not environment.is_async:
            raise ValueError("Jinja2View requires an environment created with enable_async=True")

        if globals:
            environment.globals.update(globals)
        if filters:
            environment.filters.update(filters)

        self.env = environment

    async def render_to_string(
        self,
        template: str,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Render a template to text."""
        compiled = self.env.get_template(template)
        return await compiled.render_async(**dict(variables or {}))

    async def render(
        self,
        response: Any,
        template: str,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Render a template and write it into ``response``.

        Returns:
            The response

        Raises:
            TemplateNotFound: If the template doesn't exist
            TypeError: If the response cannot accept a body
        """
        if not isinstance(response, BodyWriter):
            raise TypeError(f"{type(response).__name__} does not support write()")

        text = await self.render_to_string(template, variables)
        logger.debug("Rendered %s (%d chars)", template, len(text))

        result = response.write(text)
        return response if result is None else result
