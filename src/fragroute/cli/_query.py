"""``fragroute encode`` and ``fragroute decode`` — query-string conversion."""

import argparse
import json
import sys

from fragroute.cli._config import config_from_args
from fragroute.query import decode_query, encode_query


def run_encode(args: argparse.Namespace) -> None:
    """Encode a JSON object given on the command line as a query string."""
    config = config_from_args(args)
    try:
        data = json.loads(args.data)
        print(encode_query(data, delimiter=config.array_delimiter))
    except (json.JSONDecodeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def run_decode(args: argparse.Namespace) -> None:
    """Decode a query string and print the result as JSON."""
    config = config_from_args(args)
    query = args.query.removeprefix("?")
    print(json.dumps(decode_query(query, delimiter=config.array_delimiter), ensure_ascii=False))
