"""Fragment router — compiled route templates dispatched to handlers.

Routes are compiled when registered. Matching walks them newest-first
and hands the extracted parameters to the route's handler.
"""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from fragroute._internal.types import Handler, ParameterValue, QueryValue
from fragroute.config import DEFAULT_CONFIG, RouterConfig
from fragroute.errors import ConfigurationError
from fragroute.query import encode_query
from fragroute.routing.params import extract_parameters
from fragroute.routing.pattern import Pattern, compile_pattern
from fragroute.routing.route import Route, RouteMatch

logger = logging.getLogger("fragroute.routing")


class Router:
    """Maps fragments to handlers.

    Usage::

        router = Router()
        router.route("users/:id", show_user)
        router.dispatch("users/42?tab=posts")
        # show_user("42", {"tab": "posts"})

    Routes can also be declared on a subclass, naming handler methods::

        class AppRouter(Router):
            route_map = {
                "": "home",
                "docs(/:section)": "docs",
                "files/*path": "files",
            }

            def home(self, query=None): ...

    Routes registered later are tried first. Declared maps are bound in
    reverse, so the route declared first wins.
    """

    __slots__ = ("_routes", "config")

    route_map: ClassVar[Mapping[str, str | Handler]] = {}

    def __init__(
        self,
        routes: Mapping[str, str | Handler] | None = None,
        *,
        config: RouterConfig | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self._routes: list[Route] = []
        self._bind_routes(self.route_map if routes is None else routes)

    def _bind_routes(self, routes: Mapping[str, str | Handler]) -> None:
        for template in reversed(list(routes)):
            self.route(template, routes[template])

    def route(
        self,
        template: str | Pattern,
        name_or_handler: str | Handler = "",
        handler: Handler | None = None,
        *,
        named: bool | None = None,
    ) -> Self:
        """Register a route and return the router, for chaining.

        *template* is a template string or an already compiled ``Pattern``,
        which is registered as is; its own config snapshot and named mode
        apply and *named* is ignored.

        *name_or_handler* is either the handler itself or a name. A name
        without an explicit *handler* is looked up as a method on the
        router. *named* overrides ``config.named_parameters`` for this
        route only.

        Raises ``ConfigurationError`` if a handler name cannot be resolved.
        """
        if isinstance(template, Pattern):
            pattern = template
        else:
            pattern = compile_pattern(template, named, config=self.config)

        if callable(name_or_handler):
            handler = name_or_handler
            name = getattr(handler, "__name__", "")
        else:
            name = name_or_handler

        if handler is None and name:
            handler = getattr(self, name, None)
            if not callable(handler):
                msg = f"No handler named {name!r} for route {pattern.template!r}"
                raise ConfigurationError(msg)

        self._routes.insert(0, Route(pattern=pattern, handler=handler, name=name))
        logger.debug("Registered route %r -> %s", pattern.template, name or "<anonymous>")
        return self

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes, in match order."""
        return list(self._routes)

    def match(self, fragment: str) -> RouteMatch | None:
        """Return the first route matching *fragment*, with its arguments.

        Returns ``None`` when no route matches.
        """
        for route in self._routes:
            if route.pattern.matches(fragment):
                args = extract_parameters(route.pattern, fragment)
                return RouteMatch(route=route, args=args)
        return None

    def dispatch(self, fragment: str) -> bool:
        """Match *fragment* and execute its handler.

        Returns True if a route matched, False otherwise.
        """
        match = self.match(fragment)
        if match is None:
            logger.debug("No route matches %r", fragment)
            return False

        logger.debug("Fragment %r matched route %r", fragment, match.route.template)
        self.execute(match.route.handler, match.args, match.route.name)
        return True

    def execute(self, handler: Handler | None, args: list[ParameterValue], name: str) -> Any:
        """Call *handler* with the extracted *args*.

        Override to run setup or cleanup around every handler.
        """
        if handler is not None:
            return handler(*args)
        return None

    def to_fragment(self, path: str, query: QueryValue | str = None) -> str:
        """Return *path* with *query* serialized as a ``?query`` suffix.

        A string *query* is appended verbatim. Nothing is appended when the
        query encodes to an empty string.
        """
        if query:
            if not isinstance(query, str):
                query = encode_query(query, delimiter=self.config.array_delimiter)
            if query:
                path = f"{path}?{query}"
        return path
