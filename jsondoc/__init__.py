from __future__ import annotations

from .document import JsonDocument
from .errors import DocumentError, InvalidArgumentError, InvalidValueType, ParseError, SerializationError
from .file_document import FileDocument
from .interfaces import DocumentStore
from .json_codec import JsonOptions
from .settings import Settings, get_settings, load_settings
from .string_document import StringDocument

__all__ = [
    "DocumentStore",
    "JsonDocument",
    "StringDocument",
    "FileDocument",
    "JsonOptions",
    "Settings",
    "get_settings",
    "load_settings",
    "DocumentError",
    "ParseError",
    "SerializationError",
    "InvalidArgumentError",
    "InvalidValueType",
]
