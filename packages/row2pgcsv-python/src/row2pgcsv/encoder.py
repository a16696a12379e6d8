"""Array-literal encoder for the PostgreSQL COPY text format."""

import io
import logging
from collections.abc import Iterable
from typing import Protocol

from .errors import UnsupportedShapeError, WriteError
from .scalars import render_scalar
from .types import EncodeOptions, ScalarKind, ScalarValue, Value
from .visitor import Visitor, accept

logger = logging.getLogger(__name__)


class BinarySink(Protocol):
    """Anything that accepts written bytes, such as an open binary file."""

    def write(self, data: bytes, /) -> object: ...


class ArrayEncoder:
    """
    Visitor that writes array-literal text to a binary sink as it is visited.

    One encoder serves one top-level value. Only the outermost encoder accepts
    a record; everything below it is visited through a nested encoder that
    rejects records.

    Args:
        sink: Destination for the encoded bytes.
        options: Encoding options.
    """

    def __init__(
        self,
        sink: BinarySink,
        options: EncodeOptions | None = None,
        *,
        outermost: bool = True,
    ) -> None:
        self.sink = sink
        self.options = options or EncodeOptions()
        self.outermost = outermost
        self._inner: ArrayEncoder | None = None

    def encode(self, value: Value) -> None:
        """Encode a complete value."""
        accept(value, self)

    def encode_scalar(self, kind: ScalarKind, value: ScalarValue) -> None:
        self.write(render_scalar(kind, value, self.options.null_token))

    def begin_sequence(self, length_hint: int | None) -> "_SequenceWriter":
        self.write("{")
        return _SequenceWriter(self.nested())

    def begin_record(self, field_count: int) -> "_RecordWriter":
        if not self.outermost:
            raise UnsupportedShapeError("nested record")
        return _RecordWriter(self)

    def nested(self) -> "ArrayEncoder":
        """Return the encoder used for values inside a sequence or record."""
        if not self.outermost:
            return self
        if self._inner is None:
            self._inner = ArrayEncoder(self.sink, self.options, outermost=False)
        return self._inner

    def write(self, text: str) -> None:
        """
        Write text to the sink.

        Raises:
            UnsupportedShapeError: If the text cannot be represented in the
                configured encoding.
            WriteError: If the sink fails.
        """
        if not text:
            return
        try:
            data = text.encode(self.options.encoding)
        except UnicodeEncodeError as e:
            raise UnsupportedShapeError("text", text) from e
        try:
            self.sink.write(data)
        except (OSError, ValueError) as e:
            logger.debug(f"Sink write failed: {e}")
            raise WriteError(f"write error: {e}") from e


class _SequenceWriter:
    """Writes the elements of one sequence; owns that sequence's delimiter state."""

    def __init__(self, encoder: ArrayEncoder) -> None:
        self._encoder = encoder
        self._just_opened = True

    def visit_element(self, value: Value) -> None:
        if self._just_opened:
            self._just_opened = False
        else:
            self._encoder.write(",")
        accept(value, self._encoder)

    def end(self) -> None:
        self._encoder.write("}")


class _RecordWriter:
    """Writes the fields of the outermost record back to back, then a line terminator."""

    def __init__(self, encoder: ArrayEncoder) -> None:
        self._encoder = encoder

    def visit_field(self, name: str, value: Value) -> None:
        accept(value, self._encoder.nested())

    def end(self) -> None:
        self._encoder.write(self._encoder.options.line_terminator)


def to_writer(sink: BinarySink, value: Value, options: EncodeOptions | None = None) -> None:
    """
    Encode a value and write it to a binary sink.

    Nothing is buffered: bytes reach the sink as the value is traversed. On
    error, whatever was already written is left in the sink and should be
    discarded by the caller.

    Args:
        sink: The destination (anything with ``write(bytes)``).
        value: A scalar, a (nested) sequence of scalars, or a flat record.
        options: Encoding options.

    Raises:
        WriteError: If the sink fails.
        UnsupportedShapeError: If the value has an unsupported shape.
    """
    logger.debug(f"Encoding {type(value).__name__} value")
    ArrayEncoder(sink, options).encode(value)


def to_bytes(value: Value, options: EncodeOptions | None = None) -> bytes:
    """
    Encode a value to bytes.

    Args:
        value: The value to encode.
        options: Encoding options.

    Returns:
        The encoded bytes.
    """
    buf = io.BytesIO()
    to_writer(buf, value, options)
    return buf.getvalue()


def encode(value: Value, options: EncodeOptions | None = None) -> str:
    """
    Encode a value to an array-literal string.

    Args:
        value: The value to encode.
        options: Encoding options.

    Returns:
        The encoded text, e.g. ``"{{1,2},{3,4}}"`` for ``[[1, 2], [3, 4]]``.
    """
    opts = options or EncodeOptions()
    return to_bytes(value, opts).decode(opts.encoding)


def write_records(
    sink: BinarySink, records: Iterable[Value], options: EncodeOptions | None = None
) -> int:
    """
    Encode records one after another into the same sink.

    Each record gets its own encoder and ends with the line terminator.

    Args:
        sink: The destination, reused for every record.
        records: Dataclass instances or ``Record`` values.
        options: Encoding options.

    Returns:
        The number of records written.
    """
    opts = options or EncodeOptions()
    count = 0
    for record in records:
        ArrayEncoder(sink, opts).encode(record)
        count += 1
    logger.debug(f"Records written: {count}")
    return count


class PgArray:
    """
    A sequence whose ``str()`` is its array literal.

    Useful as a single field in a row handed to a CSV writer.

    Args:
        values: The (possibly nested) sequence of numbers.
        options: Encoding options.
    """

    def __init__(self, values: Iterable[Value], options: EncodeOptions | None = None) -> None:
        self.values = list(values)
        self.options = options

    def __str__(self) -> str:
        return encode(self.values, self.options)

    def __pg_accept__(self, visitor: Visitor) -> None:
        accept(self.values, visitor)

    def __repr__(self) -> str:
        return f"PgArray({self.values!r})"
