"""Parameter extraction for matched fragments.

Given a compiled ``Pattern`` and a fragment it matches, produce the values
a route handler receives: either positional (one slot per token, plus a
trailing query block) or a single ``{name: value}`` mapping.
"""

from fragroute._internal.types import ParameterValue
from fragroute.errors import PatternMismatch
from fragroute.query import decode_query, decode_value
from fragroute.routing.pattern import Pattern


def extract_parameters(pattern: Pattern, fragment: str) -> list[ParameterValue]:
    """Extract the parameters of *fragment* according to *pattern*.

    Path values are percent-decoded (``+`` is a space). A trailing
    ``?query`` is decoded into a nested dict that takes the last positional
    slot, and its keys are merged into the named mapping. A path name wins
    over a query key with the same name.

    Optional groups absent from the fragment yield ``None`` positionally
    and are left out of the named mapping.

    With ``encoded_splat_parts``, splat values stay undecoded. If the splat
    comes before every named token, no value is decoded at all.

    Raises ``PatternMismatch`` if *fragment* does not match *pattern*.
    """
    match = pattern.matcher.match(fragment)
    if match is None:
        raise PatternMismatch(pattern.template, fragment)

    *captured, query = match.groups()
    params: list[ParameterValue] = list(captured)
    named: dict[str, ParameterValue] = {}

    if query:
        block = decode_query(query[1:], delimiter=pattern.array_delimiter)
        named.update(block)
        params.append(block)

    raw_slots: set[int] = set()
    if pattern.encoded_splat_parts and pattern.has_splat:
        raw_slots = set(range(len(captured))) if pattern.splat_first else set(pattern.splat_slots)

    for index, value in enumerate(captured):
        if value is None:
            continue
        if index not in raw_slots:
            value = decode_value(value)
            params[index] = value
        if index < len(pattern.param_names):
            named[pattern.param_names[index]] = value

    if pattern.named_parameters:
        return [named]
    return params
