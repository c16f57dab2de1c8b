"""
Controller naming helpers.

Derives the short controller name recorded on responses, e.g.
``app.controllers.admin.ArticlesController`` -> ``articles``.
"""

from typing import Any
import re

from ..faults import NamingConventionFault


_SEPARATORS = re.compile(r"[.\\]")


def controller_type_name(controller: Any) -> str:
    """Fully-qualified type name (``module.QualName``) of a controller or class."""
    cls = controller if isinstance(controller, type) else type(controller)
    return f"{cls.__module__}.{cls.__qualname__}"


def derive_controller_name(type_name: str, *, suffix: str = "controller") -> str:
    """
    Derive the short controller name from a fully-qualified type name.

    The name is lowercased, the last dotted segment is taken and the
    suffix stripped from it.

    Args:
        type_name: Fully-qualified type name
        suffix: Naming-convention suffix (matched case-insensitively)

    Returns:
        Short controller name

    Raises:
        NamingConventionFault: If the simple name does not end with the
            suffix, or nothing is left once it is stripped

    Example:
        >>> derive_controller_name("App.Controller.HomeController")
        'home'
    """
    suffix = suffix.lower()
    simple_name = _SEPARATORS.split(type_name.lower())[-1]

    if not simple_name.endswith(suffix):
        raise NamingConventionFault(type_name, suffix)

    name = simple_name[: -len(suffix)]
    if not name:
        raise NamingConventionFault(type_name, suffix)

    return name
