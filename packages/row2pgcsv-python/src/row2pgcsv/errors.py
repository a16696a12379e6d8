"""Exceptions raised while encoding array literals."""


class EncodeError(Exception):
    """Base class for every encoding failure."""


class WriteError(EncodeError):
    """The output sink rejected a write.

    The underlying exception is available as ``__cause__``.
    """


class UnsupportedShapeError(EncodeError, TypeError):
    """The value exposed a shape the array-literal format cannot represent."""

    def __init__(self, shape: str, value: object = None) -> None:
        self.shape = shape
        self.value = value
        message = f"Cannot encode value of shape {shape!r}"
        if value is not None:
            message += f" ({type(value).__name__})"
        super().__init__(message)
