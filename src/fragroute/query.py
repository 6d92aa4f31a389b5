"""Query-string codec for route fragments.

``decode_query`` turns ``a.b=1&tags=x|y`` into nested dicts with folded
arrays; ``encode_query`` is its inverse. Keys use ``.`` for nesting and a
single delimiter character (``|`` by default) joins array values::

    decode_query("a.b=1&a.c=2&tags=x|y")
    # {"a": {"b": "1", "c": "2"}, "tags": ["x", "y"]}

    encode_query({"page": 2, "tags": ["x", "y"]})
    # "page=2&tags=|x|y"

Decoding never raises. A value with a malformed percent-escape is kept
exactly as it appeared in the fragment.
"""

import logging
import re
from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any
from urllib.parse import quote, unquote

from fragroute._internal.types import ParameterValue, QueryValue, Scalar

logger = logging.getLogger("fragroute.query")

DEFAULT_DELIMITER = "|"

# encodeURIComponent leaves these unescaped alongside letters, digits, "-_.~"
_SAFE = "!~*'()"

# A "%" without two hex digits after it makes the whole value undecodable
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# ``tags[]=a`` and ``tags%5B%5D=a`` behave like ``tags=a``
_ARRAY_MARKER = re.compile(r"\[\]|%5[Bb]%5[Dd]")


def decode_value(value: str) -> str:
    """Percent-decode one value, treating ``+`` as a space.

    Returns *value* unchanged when it holds a malformed escape or when the
    escapes do not form valid UTF-8.
    """
    if _BAD_ESCAPE.search(value):
        logger.debug("Malformed percent-escape in %r, keeping raw value", value)
        return value
    try:
        return unquote(value.replace("+", " "), errors="strict")
    except UnicodeDecodeError:
        logger.debug("Escapes in %r are not valid UTF-8, keeping raw value", value)
        return value


def decode_query(
    query_string: str,
    *,
    delimiter: str | None = DEFAULT_DELIMITER,
) -> dict[str, ParameterValue]:
    """Decode ``key=value&key=value`` text into a nested query block.

    Dotted keys build nested dicts, values holding *delimiter* become
    lists, and repeated keys accumulate into a list in encounter order.
    Only the first ``=`` of a pair separates key from value.
    """
    data: dict[str, Any] = {}
    for pair in query_string.split("&"):
        if not pair:
            continue
        key, _, raw = pair.partition("=")
        _assign(data, key, raw, delimiter)
    return data


def _assign(data: dict[str, Any], key: str, raw: str, delimiter: str | None) -> None:
    """Walk (creating as needed) the dotted *key* path and set the leaf."""
    *parents, leaf = _ARRAY_MARKER.sub("", key).split(".")
    node = data
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            child = node[part] = {}
        node = child
    node[leaf] = _fold(raw, node.get(leaf), delimiter)


def _fold(raw: str, current: Any, delimiter: str | None) -> ParameterValue:
    """Combine a raw leaf value with whatever is already stored at its key.

    ``a=|b`` is a one-element array, ``a=b|c`` a two-element one. An
    explicit array replaces the current value; a scalar is appended.
    """
    if delimiter and delimiter in raw:
        return [decode_value(piece) for piece in raw.split(delimiter) if piece]

    value = decode_value(raw)
    if current is None or current == "":
        return value
    if isinstance(current, list):
        current.append(value)
        return current
    return [current, value]


def encode_value(value: Scalar, *, delimiter: str | None = DEFAULT_DELIMITER) -> str:
    """Percent-encode one scalar, escaping *delimiter* inside it.

    Booleans are written ``true``/``false``, whole floats without ``.0``,
    and dates in ISO format.
    """
    match value:
        case bool():
            text = "true" if value else "false"
        case date():
            text = value.isoformat()
        case float() if value.is_integer():
            text = str(int(value))
        case _:
            text = str(value)

    encoded = quote(text, safe=_SAFE)
    if delimiter:
        encoded = encoded.replace(delimiter, _escape(delimiter))
    return encoded


def encode_query(
    value: QueryValue,
    prefix: str = "",
    *,
    delimiter: str | None = DEFAULT_DELIMITER,
) -> str:
    """Serialize a mapping to query-string text.

    Nested mappings flatten to dotted keys (*prefix* carries the path
    during recursion), sequences join with *delimiter*, and ``None``
    values are skipped. Returns ``""`` for an empty or missing value.

    Raises ``TypeError`` for values that are neither scalar, sequence,
    nor mapping.
    """
    if not value:
        return ""
    if not isinstance(value, Mapping):
        msg = f"encode_query expects a mapping, got {type(value).__name__}"
        raise TypeError(msg)

    pairs: list[str] = []
    for name, item in value.items():
        full_name = f"{prefix}{name}"
        match item:
            case None:
                continue
            case str() | int() | float() | date():
                pairs.append(f"{full_name}={encode_value(item, delimiter=delimiter)}")
            case list() | tuple():
                pairs.extend(_encode_array(full_name, item, delimiter))
            case Mapping():
                nested = encode_query(item, f"{full_name}.", delimiter=delimiter)
                if nested:
                    pairs.append(nested)
            case _:
                msg = f"Cannot encode {type(item).__name__} value for query key {full_name!r}"
                raise TypeError(msg)
    return "&".join(pairs)


def _encode_array(
    name: str,
    items: Sequence[Scalar | None],
    delimiter: str | None,
) -> list[str]:
    """Encode one array value; empty and all-``None`` arrays emit nothing.

    Without a delimiter the values are written as repeated keys, which
    ``decode_query`` folds back into a list.
    """
    encoded = [encode_value(item, delimiter=delimiter) for item in items if item is not None]
    if not encoded:
        return []
    if not delimiter:
        return [f"{name}={item}" for item in encoded]
    return [f"{name}=" + "".join(delimiter + item for item in encoded)]


def _escape(char: str) -> str:
    # quote() never escapes "~" and friends, so build the %XX form directly
    return "".join(f"%{byte:02X}" for byte in char.encode())
