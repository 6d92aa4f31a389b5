"""Fragroute CLI — inspect route templates and query strings from a shell.

Entry point registered as ``fragroute`` in ``pyproject.toml``::

    [project.scripts]
    fragroute = "fragroute.cli:main"
"""

import argparse
import sys


def _add_delimiter(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--delimiter",
        default="|",
        help="Array-join delimiter for query values (default: '|', '' disables)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``fragroute`` command."""
    parser = argparse.ArgumentParser(
        prog="fragroute",
        description="Fragroute — route templates, parameter extraction, and query strings.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- fragroute compile ------------------------------------------------
    compile_parser = subparsers.add_parser("compile", help="Show the compiled form of a template")
    compile_parser.add_argument("template", help="Route template (e.g. 'users/:id')")

    # -- fragroute match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Extract parameters from a fragment")
    match_parser.add_argument("template", help="Route template (e.g. 'users/:id')")
    match_parser.add_argument("fragment", help="Fragment to match (e.g. 'users/42?tab=posts')")
    match_parser.add_argument(
        "--named",
        action="store_true",
        help="Return a single {name: value} mapping instead of positional values",
    )
    match_parser.add_argument(
        "--encoded-splat",
        action="store_true",
        help="Leave splat values percent-encoded",
    )
    _add_delimiter(match_parser)

    # -- fragroute encode -------------------------------------------------
    encode_parser = subparsers.add_parser("encode", help="Encode a JSON object as a query string")
    encode_parser.add_argument("data", help='JSON object (e.g. \'{"tags": ["a", "b"]}\')')
    _add_delimiter(encode_parser)

    # -- fragroute decode -------------------------------------------------
    decode_parser = subparsers.add_parser("decode", help="Decode a query string to JSON")
    decode_parser.add_argument("query", help="Query string, with or without a leading '?'")
    _add_delimiter(decode_parser)

    # -- fragroute routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes of a Router")
    routes_parser.add_argument("router", help="Import string (e.g. myapp:router)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "compile":
        from fragroute.cli._inspect import run_compile

        run_compile(args)
    elif args.command == "match":
        from fragroute.cli._inspect import run_match

        run_match(args)
    elif args.command == "encode":
        from fragroute.cli._query import run_encode

        run_encode(args)
    elif args.command == "decode":
        from fragroute.cli._query import run_decode

        run_decode(args)
    elif args.command == "routes":
        from fragroute.cli._routes import run_routes

        run_routes(args)
