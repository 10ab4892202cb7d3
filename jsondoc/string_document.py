from __future__ import annotations

import logging
from typing import Any, Mapping

from .document import JsonDocument
from .errors import InvalidArgumentError, ParseError, SerializationError
from .json_codec import decode, encode
from .settings import Settings

logger = logging.getLogger(__name__)

SOURCE = "<string>"


class StringDocument(JsonDocument):
    """
    Document backed by an in-memory JSON string.

    `raw()` returns the text as of the last load or save; mutations only show
    up there after `save()`.
    """

    def __init__(self, source: str, values: Mapping[str, Any] | None = None, *, settings: Settings | None = None):
        self._raw = source
        super().__init__(values, settings=settings)

    @classmethod
    def make(cls, data: Any, *, settings: Settings | None = None) -> "StringDocument":
        if isinstance(data, str) and _is_json(data):
            return cls(data, settings=settings)
        if isinstance(data, (dict, list)):
            try:
                text = encode(data)
            except (TypeError, ValueError) as e:
                raise SerializationError(f"failed to encode: {e}", source=SOURCE, cause=e) from e
            return cls(text, settings=settings)
        raise InvalidArgumentError(f"Invalid data type provided: {type(data).__name__}")

    def raw(self) -> str:
        return self._raw

    def load(self) -> dict[str, Any]:
        try:
            data = decode(self._raw)
        except ValueError as e:
            raise ParseError(f"failed to load: {e}", source=SOURCE, cause=e) from e
        logger.debug("JSON STRING LOAD: %d entries", len(data))
        return data

    def save(self) -> None:
        try:
            self._raw = encode(self._data, self._settings.json_options())
        except (TypeError, ValueError) as e:
            raise SerializationError(f"failed to save: {e}", source=SOURCE, cause=e) from e
        logger.debug("JSON STRING SAVE: %d entries", len(self._data))


def _is_json(text: str) -> bool:
    try:
        decode(text)
    except ValueError:
        return False
    return bool(text.strip())
