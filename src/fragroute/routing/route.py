"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass

from fragroute._internal.types import Handler, ParameterValue
from fragroute.routing.pattern import Pattern


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route: compiled pattern plus the handler it dispatches to.

    Created by ``Router.route()``. ``name`` is the handler name used in
    logs and is empty for anonymous callables.
    """

    pattern: Pattern
    handler: Handler | None
    name: str = ""

    @property
    def template(self) -> str:
        return self.pattern.template


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful fragment match."""

    route: Route
    args: list[ParameterValue]
