from __future__ import annotations


class DocumentError(RuntimeError):
    """
    Raised when a document cannot be read from or written to its backing store.

    `source` is the file path (or "<string>") and `cause` the underlying exception.
    """

    def __init__(self, message: str, *, source: str | None = None, cause: BaseException | None = None):
        super().__init__(message)
        self.source = source
        self.cause = cause


class ParseError(DocumentError):
    pass


class SerializationError(DocumentError):
    pass


class InvalidArgumentError(DocumentError, ValueError):
    pass


class InvalidValueType(DocumentError, TypeError):
    pass
