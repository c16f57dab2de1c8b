"""
Action Table

Maps action names to controller methods. Built once per controller class
at route registration and reused for every dispatch and forward.
"""

from typing import Any, Callable, Dict, FrozenSet, Iterator, Type
import inspect
import weakref

from ..faults import MethodNotFoundFault
from .naming import controller_type_name


# Capability hooks are never routable actions.
RESERVED_NAMES: FrozenSet[str] = frozenset({"init", "set_request", "set_response"})


class ActionTable:
    """
    Registered mapping of action name -> function for one controller class.

    Actions are the public functions (sync or async) defined along the
    class MRO. Names starting with an underscore, capability hooks and
    every member of a controller base class (a class whose own namespace
    sets ``_controller_base = True``) are excluded.

    Resolution binds through ``getattr`` so per-instance overrides keep
    working.
    """

    # Weakly keyed so controller classes built at runtime can be collected.
    _cache: "weakref.WeakKeyDictionary[Type, ActionTable]" = weakref.WeakKeyDictionary()

    def __init__(self, controller_class: Type):
        self.type_name = controller_type_name(controller_class)
        self._actions = self._collect(controller_class)

    @classmethod
    def for_class(cls, controller_class: Type) -> "ActionTable":
        """Return the cached table for a controller class."""
        table = cls._cache.get(controller_class)
        if table is None:
            table = cls(controller_class)
            cls._cache[controller_class] = table
        return table

    @staticmethod
    def _collect(controller_class: Type) -> Dict[str, Callable]:
        actions: Dict[str, Callable] = {}
        base_members: set = set()

        for klass in reversed(controller_class.__mro__):
            if klass is object:
                continue
            namespace = vars(klass)
            is_base = namespace.get("_controller_base", False)

            for name, attr in namespace.items():
                if name.startswith("_") or name in RESERVED_NAMES:
                    continue
                if is_base:
                    base_members.add(name)
                    continue
                if name in base_members:
                    continue

                func = attr.__func__ if isinstance(attr, (staticmethod, classmethod)) else attr
                if inspect.isfunction(func):
                    actions[name] = func
                else:
                    actions.pop(name, None)

        return actions

    def __contains__(self, action_name: str) -> bool:
        return action_name in self._actions

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._actions))

    def __len__(self) -> int:
        return len(self._actions)

    @property
    def names(self) -> list:
        return sorted(self._actions)

    def require(self, action_name: str) -> None:
        """Raise MethodNotFoundFault unless the action is registered."""
        if action_name not in self._actions:
            raise MethodNotFoundFault(self.type_name, action_name, self._actions)

    def resolve(self, controller: Any, action_name: str) -> Callable:
        """
        Resolve an action name to a bound callable on ``controller``.

        Raises:
            MethodNotFoundFault: If the action is not registered
        """
        self.require(action_name)
        return getattr(controller, action_name)
