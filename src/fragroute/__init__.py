"""Fragroute — route templates, parameter extraction, and a query-string codec.

Routes fragments like ``users/42?tab=posts`` to handlers.

Basic usage::

    from fragroute import Router

    router = Router()
    router.route("users/:id", lambda user_id, query=None: print(user_id, query))
    router.dispatch("users/42?tab=posts")   # 42 {'tab': 'posts'}

Lower-level pieces::

    from fragroute import compile_pattern, extract_parameters

    pattern = compile_pattern("files/*path")
    extract_parameters(pattern, "files/a/b.txt")   # ['a/b.txt']

    from fragroute import decode_query, encode_query

    encode_query({"tags": ["x", "y"], "page": 2})   # 'tags=|x|y&page=2'
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "FragrouteError",
    "Pattern",
    "PatternMismatch",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "compile_pattern",
    "decode_query",
    "decode_value",
    "encode_query",
    "extract_parameters",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "fragroute.errors",
    "FragrouteError": "fragroute.errors",
    "PatternMismatch": "fragroute.errors",
    "Pattern": "fragroute.routing.pattern",
    "compile_pattern": "fragroute.routing.pattern",
    "extract_parameters": "fragroute.routing.params",
    "Route": "fragroute.routing.route",
    "RouteMatch": "fragroute.routing.route",
    "Router": "fragroute.routing.router",
    "RouterConfig": "fragroute.config",
    "decode_query": "fragroute.query",
    "decode_value": "fragroute.query",
    "encode_query": "fragroute.query",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fragroute`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
