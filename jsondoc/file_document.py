from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

from .document import JsonDocument
from .errors import DocumentError, ParseError, SerializationError
from .json_codec import decode, encode
from .settings import Settings

logger = logging.getLogger(__name__)


class FileDocument(JsonDocument):
    """
    Document persisted as a single UTF-8 JSON file.

    - A missing file loads as an empty mapping.
    - Saving an empty mapping removes the file (best effort).
    - Saving otherwise rewrites the whole file.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        values: Mapping[str, Any] | None = None,
        *,
        settings: Settings | None = None,
    ):
        self._path = Path(path)
        super().__init__(values, settings=settings)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        if not self._path.exists():
            logger.debug("JSON FILE LOAD: %s missing, starting empty", self._path)
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"failed to load from {self._path}: {e}", source=str(self._path), cause=e) from e
        except OSError as e:
            raise DocumentError(f"failed to load from {self._path}: {e}", source=str(self._path), cause=e) from e
        try:
            data = decode(text)
        except ValueError as e:
            raise ParseError(f"failed to load from {self._path}: {e}", source=str(self._path), cause=e) from e
        logger.debug("JSON FILE LOAD: %s (%d entries)", self._path, len(data))
        return data

    def save(self) -> None:
        if not self._data:
            try:
                self._path.unlink(missing_ok=True)
            except OSError as e:
                logger.debug("JSON FILE SAVE: could not remove %s: %r", self._path, e)
            return

        try:
            text = encode(self._data, self._settings.json_options())
        except (TypeError, ValueError) as e:
            raise SerializationError(f"failed to save to {self._path}: {e}", source=str(self._path), cause=e) from e
        try:
            if self._settings.create_dirs:
                self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise DocumentError(f"failed to save to {self._path}: {e}", source=str(self._path), cause=e) from e
        logger.debug("JSON FILE SAVE: %s (%d entries)", self._path, len(self._data))
