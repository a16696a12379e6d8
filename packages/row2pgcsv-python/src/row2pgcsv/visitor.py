"""
Visitor protocol between encodable values and encoders.

A value describes its own shape by calling back into a Visitor: a leaf calls
``encode_scalar``, a sequence opens a SequenceContext and visits each element,
and the single outermost record opens a RecordContext and visits each field.

Native Python values are classified by ``accept``. Any other object can take
part by defining ``__pg_accept__(self, visitor)``; the explicit ``Scalar``,
``Array`` and ``Record`` variants do exactly that.
"""

from collections.abc import Iterable, Mapping, Sequence, Set, Sized
from dataclasses import dataclass, fields, is_dataclass
from typing import Protocol

from .errors import UnsupportedShapeError
from .scalars import classify_scalar
from .types import ScalarKind, ScalarValue, Value


class SequenceContext(Protocol):
    """Receives the elements of one open sequence."""

    def visit_element(self, value: Value) -> None:
        """Encode the next element of the sequence."""
        ...

    def end(self) -> None:
        """Close the sequence."""
        ...


class RecordContext(Protocol):
    """Receives the fields of the outermost record."""

    def visit_field(self, name: str, value: Value) -> None:
        """Encode one field. The name is informational only."""
        ...

    def end(self) -> None:
        """Close the record."""
        ...


class Visitor(Protocol):
    """The sink side of the protocol, implemented by encoders."""

    def encode_scalar(self, kind: ScalarKind, value: ScalarValue) -> None:
        """Encode a leaf value of the given kind."""
        ...

    def begin_sequence(self, length_hint: int | None) -> SequenceContext:
        """Open a sequence; length_hint is None when the length is unknown."""
        ...

    def begin_record(self, field_count: int) -> RecordContext:
        """Open the outermost record."""
        ...


@dataclass(frozen=True)
class Scalar:
    """A leaf value with an explicit kind."""

    kind: ScalarKind
    value: ScalarValue = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ScalarKind):
            raise TypeError(f"kind must be a ScalarKind, not {type(self.kind).__name__}")

    def __pg_accept__(self, visitor: Visitor) -> None:
        visitor.encode_scalar(self.kind, self.value)


@dataclass(frozen=True)
class Array:
    """An ordered sequence of values, encoded as one brace pair."""

    items: Iterable[Value] = ()

    def __pg_accept__(self, visitor: Visitor) -> None:
        _accept_sequence(self.items, visitor)


@dataclass(frozen=True)
class Record:
    """A flat set of named fields, valid only as the outermost value."""

    fields: Sequence[tuple[str, Value]] = ()

    def __post_init__(self) -> None:
        if isinstance(self.fields, Mapping):
            raise TypeError("Record fields must be (name, value) pairs, not a mapping")

    def __pg_accept__(self, visitor: Visitor) -> None:
        _accept_record(self.fields, visitor)


def accept(value: Value, visitor: Visitor) -> None:
    """
    Drive a visitor over a value, depth-first.

    Args:
        value: The value to traverse.
        visitor: The encoder receiving the callbacks.

    Raises:
        UnsupportedShapeError: If the value (or anything inside it) has a
            shape the protocol does not support.
    """
    hook = getattr(type(value), "__pg_accept__", None)
    if hook is not None:
        hook(value, visitor)
        return

    kind = classify_scalar(value)
    if kind is not None:
        visitor.encode_scalar(kind, value)
        return

    shape = _unsupported_shape(value)
    if shape is not None:
        raise UnsupportedShapeError(shape, value)

    if is_dataclass(value) and not isinstance(value, type):
        _accept_record([(f.name, getattr(value, f.name)) for f in fields(value)], visitor)
        return

    if isinstance(value, Iterable):
        _accept_sequence(value, visitor)
        return

    raise UnsupportedShapeError("unknown", value)


def _accept_sequence(items: Iterable[Value], visitor: Visitor) -> None:
    """Visit a sequence and each of its elements in order."""
    length_hint = len(items) if isinstance(items, Sized) else None
    seq = visitor.begin_sequence(length_hint)
    for item in items:
        seq.visit_element(item)
    seq.end()


def _accept_record(record_fields: Sequence[tuple[str, Value]], visitor: Visitor) -> None:
    """Visit a record's fields in declaration order."""
    rec = visitor.begin_record(len(record_fields))
    for name, value in record_fields:
        rec.visit_field(name, value)
    rec.end()


def _unsupported_shape(value: Value) -> str | None:
    """Name the shape of a value the format rejects, or None if it may be supported."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return "bytes"
    if isinstance(value, tuple):
        return "tuple"
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, Set):
        return "set"
    return None
