"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, and
snapshotted into every compiled pattern so later changes never alter
how an existing route decodes.
"""

from dataclasses import dataclass

from fragroute.errors import ConfigurationError

# Characters that already carry meaning inside a query string or fragment
_RESERVED_DELIMITERS = frozenset("&=.?#%")


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(named_parameters=True, array_delimiter=",")
    """

    # Query strings: ``tags=a|b`` decodes to ["a", "b"]; None disables folding
    array_delimiter: str | None = "|"

    # Handlers receive a single {name: value} mapping instead of positional args
    named_parameters: bool = False

    # Leave splat captures percent-encoded (e.g. already-encoded sub-paths)
    encoded_splat_parts: bool = False

    def __post_init__(self) -> None:
        delimiter = self.array_delimiter
        if not delimiter:
            return
        if len(delimiter) != 1:
            msg = f"array_delimiter must be a single character, got {delimiter!r}"
            raise ConfigurationError(msg)
        if delimiter in _RESERVED_DELIMITERS:
            msg = f"array_delimiter {delimiter!r} collides with query-string syntax"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = RouterConfig()
