"""``fragroute compile`` and ``fragroute match`` — template inspection."""

import argparse
import json
import sys

from fragroute.cli._config import config_from_args
from fragroute.routing.params import extract_parameters
from fragroute.routing.pattern import compile_pattern


def run_compile(args: argparse.Namespace) -> None:
    """Print the regex, parameter names, and splat position of a template."""
    pattern = compile_pattern(args.template)
    print(f"regex:   {pattern.matcher.pattern}")
    print(f"params:  {', '.join(pattern.param_names) or '-'}")
    if pattern.has_splat:
        print(f"splat:   {pattern.splat_relative_index}")


def run_match(args: argparse.Namespace) -> None:
    """Print the parameters extracted from a fragment as JSON.

    Exits with code 1 if the fragment does not match the template.
    """
    pattern = compile_pattern(args.template, config=config_from_args(args))
    if not pattern.matches(args.fragment):
        print(f"No match: {args.fragment!r} against {args.template!r}", file=sys.stderr)
        raise SystemExit(1)

    print(json.dumps(extract_parameters(pattern, args.fragment), ensure_ascii=False))
