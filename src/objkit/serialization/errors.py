"""Codec error types."""


class CodecError(Exception):
    """Base class for JSON encode/decode failures."""


class EncodeError(CodecError, TypeError):
    """Raised when a value cannot be rendered as JSON."""


class DecodeError(CodecError, ValueError):
    """Raised when JSON text cannot be parsed into a record."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
