"""Build a RouterConfig from shared CLI flags."""

import argparse
import sys

from fragroute.config import RouterConfig
from fragroute.errors import ConfigurationError


def config_from_args(args: argparse.Namespace) -> RouterConfig:
    """Return the ``RouterConfig`` described by *args*, exiting 2 if invalid."""
    try:
        return RouterConfig(
            array_delimiter=args.delimiter or None,
            named_parameters=getattr(args, "named", False),
            encoded_splat_parts=getattr(args, "encoded_splat", False),
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
