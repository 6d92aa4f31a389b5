"""``fragroute routes`` — list registered routes.

Resolves an import string to a Router and prints every route with its
template, parameters, and handler, in match order.
"""

import argparse
import sys

from fragroute.cli._resolve import resolve_router
from fragroute.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a fragroute Router."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    # Build rows: (template, params, handler_name)
    rows: list[tuple[str, str, str]] = []
    for route in routes:
        params = ", ".join(route.pattern.param_names) or "-"
        rows.append((route.template or "''", params, route.name or "<anonymous>"))

    max_template = max(max(len(r[0]) for r in rows), 5)  # "ROUTE" header
    max_params = max(max(len(r[1]) for r in rows), 6)  # "PARAMS" header

    fmt = f"{{:<{max_template}}}  {{:<{max_params}}}  {{}}"
    print(fmt.format("ROUTE", "PARAMS", "HANDLER"))
    sep_len = max_template + max_params + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
