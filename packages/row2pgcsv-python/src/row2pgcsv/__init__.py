"""
row2pgcsv - array literals for the PostgreSQL COPY command

Encodes numbers and (nested) sequences of numbers to the text form that
COPY reads for array columns: ``[1, 2]`` becomes ``{1,2}`` and
``[[1, 2], [3, 4]]`` becomes ``{{1,2},{3,4}}``.

Characters that are special to COPY or CSV (commas, quotes, backslashes) are
never escaped, so arrays of strings are not supported.

Usage:
    import row2pgcsv

    row2pgcsv.encode([[333, 634], [599, 3776]])  # '{{333,634},{599,3776}}'

    # Stream straight into a binary file
    with open("out.txt", "wb") as f:
        row2pgcsv.to_writer(f, [2, 3, 5, 7, 11])

    # As one field of a CSV row
    writer.writerow([634, 42.195, row2pgcsv.PgArray([2, 3, 5, 7, 11])])
"""

__version__ = "0.1.0"

from .encoder import ArrayEncoder, PgArray, encode, to_bytes, to_writer, write_records
from .errors import EncodeError, UnsupportedShapeError, WriteError
from .types import EncodeOptions, ScalarKind
from .visitor import Array, Record, RecordContext, Scalar, SequenceContext, Visitor, accept

__all__ = [
    # Version
    "__version__",
    # Main API
    "encode",
    "to_bytes",
    "to_writer",
    "write_records",
    "PgArray",
    # Options
    "EncodeOptions",
    # Visitor protocol
    "Visitor",
    "SequenceContext",
    "RecordContext",
    "ArrayEncoder",
    "accept",
    # Types
    "ScalarKind",
    "Scalar",
    "Array",
    "Record",
    # Errors
    "EncodeError",
    "WriteError",
    "UnsupportedShapeError",
]
