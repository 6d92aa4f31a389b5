"""Router lookup for ``fragroute routes``.

Turns ``"module:attribute"`` into a populated Router. The attribute may be
a Router, a Router subclass (instantiated so its ``route_map`` is bound),
a bare ``route_map`` mapping, or a zero-argument factory returning either.
"""

import importlib
from collections.abc import Mapping
from typing import Any

from fragroute.errors import ConfigurationError
from fragroute.routing.router import Router

DEFAULT_ATTRIBUTE = "router"


def resolve_router(target: str) -> Router:
    """Import *target* and build the Router it describes.

    ``"myapp.nav"`` looks up ``myapp.nav.router``.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the module has no such attribute.
        ConfigurationError: If the attribute does not describe a Router, or
            a mapping names a handler that cannot be resolved.
    """
    module_path, _, attr_name = target.partition(":")
    obj = getattr(importlib.import_module(module_path), attr_name or DEFAULT_ATTRIBUTE)

    router = _as_router(obj)
    if router is None and callable(obj) and not isinstance(obj, type):
        router = _as_router(obj())
    if router is None:
        msg = (
            f"{target!r} is a {type(obj).__name__}; expected a Router, a Router "
            "subclass, a route_map mapping, or a factory returning one of those"
        )
        raise ConfigurationError(msg)
    return router


def _as_router(obj: Any) -> Router | None:
    match obj:
        case Router():
            return obj
        case type() if issubclass(obj, Router):
            return obj()
        case Mapping():
            return Router(obj)
    return None
