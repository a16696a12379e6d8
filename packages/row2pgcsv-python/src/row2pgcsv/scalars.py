"""Scalar rendering for array literals."""

import math
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from .errors import UnsupportedShapeError
from .types import ScalarKind

if TYPE_CHECKING:
    from .types import ScalarValue


def classify_scalar(value: object) -> ScalarKind | None:
    """
    Work out the scalar kind of a native Python value.

    Args:
        value: Any value.

    Returns:
        The matching kind, or None if the value is not a scalar.
    """
    if value is None:
        return ScalarKind.NONE

    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return ScalarKind.BOOL

    if isinstance(value, int):
        return ScalarKind.SIGNED_INT if value < 0 else ScalarKind.UNSIGNED_INT

    if isinstance(value, (float, Decimal)):
        return ScalarKind.FLOAT

    if isinstance(value, Enum):
        return ScalarKind.TEXT

    if isinstance(value, str):
        return ScalarKind.CHAR if len(value) == 1 else ScalarKind.TEXT

    return None


def render_scalar(kind: ScalarKind, value: "ScalarValue", null_token: str = "") -> str:
    """
    Render a scalar as array-literal text.

    Text and chars are written as-is. Delimiters and quotes are not escaped.

    Args:
        kind: The scalar kind reported by the value.
        value: The scalar itself.
        null_token: Text used for ScalarKind.NONE.

    Returns:
        The rendered text.

    Raises:
        UnsupportedShapeError: If the value does not fit the kind.
    """
    if kind is ScalarKind.NONE:
        if value is not None:
            raise UnsupportedShapeError(kind.value, value)
        return null_token

    if kind is ScalarKind.BOOL:
        return "true" if value else "false"

    if kind in (ScalarKind.SIGNED_INT, ScalarKind.UNSIGNED_INT):
        if isinstance(value, bool) or not isinstance(value, int):
            raise UnsupportedShapeError(kind.value, value)
        if kind is ScalarKind.UNSIGNED_INT and value < 0:
            raise UnsupportedShapeError(kind.value, value)
        # int() drops IntEnum and other subclass formatting
        return str(int(value))

    if kind is ScalarKind.FLOAT:
        if isinstance(value, Decimal):
            return format(value, "f")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise UnsupportedShapeError(kind.value, value)
        return _render_float(float(value))

    if kind in (ScalarKind.CHAR, ScalarKind.TEXT):
        if isinstance(value, Enum):
            return value.name
        if not isinstance(value, str):
            raise UnsupportedShapeError(kind.value, value)
        return value

    raise UnsupportedShapeError(str(kind), value)


def _render_float(value: float) -> str:
    """Render a float positionally, with the shortest digits that round-trip."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # repr picks the digits; Decimal lays them out without an exponent
    s = format(Decimal(repr(value)), "f")
    if s.endswith(".0"):
        return s[:-2]
    return s
