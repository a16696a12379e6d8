"""Type definitions for the array-literal encoder."""

import codecs
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

# Scalar type aliases
NumericScalar = int | float | Decimal
ScalarValue = NumericScalar | bool | str | Enum | None

# Anything the encoder may be handed; the shape is checked at traversal time
Value = Any


class ScalarKind(Enum):
    """The leaf kinds a value can expose to a visitor."""

    SIGNED_INT = "signed-int"
    UNSIGNED_INT = "unsigned-int"
    FLOAT = "float"
    BOOL = "bool"
    CHAR = "char"
    TEXT = "text"
    NONE = "none"


@dataclass
class EncodeOptions:
    """Options for array-literal encoding."""

    line_terminator: str = "\n"
    """Written once after the last field of a record."""

    null_token: str = ""
    """Text emitted for an absent value. PostgreSQL reads "NULL" as a null element."""

    encoding: str = "utf-8"
    """Byte encoding used when writing to the sink."""

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from e
