from __future__ import annotations

from typing import Protocol

from pydantic import JsonValue


class DocumentStore(Protocol):
    """
    A JSON object persisted in some backing store (a string, a file, ...).
    """

    def load(self) -> dict[str, JsonValue]:
        """Read the backing store and return its mapping (empty if the store is absent)."""
        ...

    def save(self) -> None:
        """Write the current mapping back to the backing store."""
        ...
