"""Route template compiler.

Templates use a small syntax::

    "users/:id"          named segment — one path component, no "/" or "?"
    "files/*path"        splat — any run of characters up to a "?"
    "docs(/:section)"    optional group — may be absent from the fragment

``compile_pattern`` turns a template into a ``Pattern`` whose matcher is
anchored to the whole fragment and ends with an optional ``?query`` group.
Malformed templates still compile; they produce a pattern that never
matches.
"""

import logging
import re
from dataclasses import dataclass

from fragroute.config import DEFAULT_CONFIG, RouterConfig

logger = logging.getLogger("fragroute.routing")

# Template tokens, searched in the raw template
_SPLAT = re.compile(r"\*\w+")
_FIRST_NAMED = re.compile(r":\w+")
_TOKEN = re.compile(r"[:*](\w+)")

# Named tokens after optional groups are rewritten. A match carrying the
# "(?" prefix is the "(?:word" of a rewritten group, not a parameter.
_NAMED = re.compile(r"(\(\?)?:\w+")

# Regex metacharacters that are not part of the template syntax
_ESCAPE = re.compile(r"[\-{}\[\]+?.,\\^$|#\s]")

NAMED_CAPTURE = r"([^/?]+)"
SPLAT_CAPTURE = r"([^?]*?)"
QUERY_CAPTURE = r"(\?.*)?"

_NEVER = re.compile(r"(?!)")


@dataclass(frozen=True, slots=True)
class Pattern:
    """A compiled route template. Immutable after compilation.

    ``matcher`` has one capture group per entry in ``param_names`` plus a
    final group holding the ``?query`` suffix, if any.

    ``splat_relative_index`` is ``None`` without a splat. Otherwise it is
    the offset of the first splat minus the offset of the first named
    token, or ``-1`` when the template has no named token. A negative
    value means the splat comes first.

    The config fields are copied at compile time so a pattern keeps
    decoding the same way for its whole lifetime.
    """

    template: str
    matcher: re.Pattern[str]
    param_names: tuple[str, ...] = ()
    splat_relative_index: int | None = None
    splat_slots: tuple[int, ...] = ()
    named_parameters: bool = False
    encoded_splat_parts: bool = False
    array_delimiter: str | None = "|"

    @property
    def has_splat(self) -> bool:
        return self.splat_relative_index is not None

    @property
    def splat_first(self) -> bool:
        """True when a splat occurs before any named token."""
        return self.splat_relative_index is not None and self.splat_relative_index < 0

    def matches(self, fragment: str) -> bool:
        """Return True if *fragment* matches this pattern as a whole."""
        return self.matcher.match(fragment) is not None


def compile_pattern(
    template: str,
    named_parameters: bool | None = None,
    *,
    config: RouterConfig | None = None,
) -> Pattern:
    """Compile a route template into a ``Pattern``.

    Args:
        template: Route template, e.g. ``"users/:id(/*rest)"``.
        named_parameters: Extract a single ``{name: value}`` mapping instead
            of positional values. ``None`` uses ``config.named_parameters``.
        config: Router configuration to snapshot into the pattern.

    Never raises. A template that does not form a valid regex compiles
    to a pattern that never matches, and a warning is logged.
    """
    config = config or DEFAULT_CONFIG
    if named_parameters is None:
        named_parameters = config.named_parameters

    splat = _SPLAT.search(template)
    named = _FIRST_NAMED.search(template)
    tokens = list(_TOKEN.finditer(template))

    body = _ESCAPE.sub(r"\\\g<0>", template)
    body = _rewrite_optional_groups(body)
    body = _NAMED.sub(lambda m: m.group(0) if m.group(1) else NAMED_CAPTURE, body)
    body = _SPLAT.sub(SPLAT_CAPTURE, body)
    source = f"^{body}{QUERY_CAPTURE}\\Z"

    try:
        matcher = re.compile(source)
    except re.error as exc:
        logger.warning("Route %r does not compile (%s), it will never match", template, exc)
        matcher = _NEVER

    splat_relative_index: int | None = None
    if splat is not None:
        splat_relative_index = splat.start() - named.start() if named is not None else -1

    pattern = Pattern(
        template=template,
        matcher=matcher,
        param_names=tuple(token.group(1) for token in tokens),
        splat_relative_index=splat_relative_index,
        splat_slots=tuple(i for i, token in enumerate(tokens) if token.group(0)[0] == "*"),
        named_parameters=named_parameters,
        encoded_splat_parts=config.encoded_splat_parts,
        array_delimiter=config.array_delimiter,
    )
    logger.debug("Compiled route %r as %r", template, matcher.pattern)
    return pattern


def _rewrite_optional_groups(source: str) -> str:
    """Turn each balanced ``( … )`` into ``(?: … )?``.

    Groups may nest. Unbalanced parentheses are left alone, which makes
    the final regex invalid.
    """
    balanced: set[int] = set()
    opened: list[int] = []
    for index, char in enumerate(source):
        if char == "(":
            opened.append(index)
        elif char == ")" and opened:
            balanced.add(opened.pop())
            balanced.add(index)

    return "".join(
        ("(?:" if char == "(" else ")?") if index in balanced else char
        for index, char in enumerate(source)
    )
