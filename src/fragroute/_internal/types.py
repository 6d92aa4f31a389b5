"""Shared type aliases used across fragroute modules."""

from collections.abc import Callable, Mapping, Sequence
from datetime import date
from typing import Any, TypeAlias

# Leaf values the query encoder writes as ``name=value``
Scalar: TypeAlias = str | int | float | bool | date

# Anything encode_query accepts: scalar, array of scalars, or nested mapping
QueryValue: TypeAlias = Scalar | Sequence[Scalar | None] | Mapping[str, "QueryValue"] | None

# A decoded value: string, folded array, nested query block, or an absent optional group
ParameterValue: TypeAlias = str | list[str] | dict[str, Any] | None

# Route handler — user-defined function receiving the extracted parameters
Handler: TypeAlias = Callable[..., Any]
