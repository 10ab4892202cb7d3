from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Iterator, Mapping

from pydantic import JsonValue, TypeAdapter, ValidationError

from .errors import InvalidArgumentError, InvalidValueType, SerializationError
from .interfaces import DocumentStore
from .json_codec import JsonOptions, encode
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

_MAPPING_ADAPTER: TypeAdapter[dict[str, JsonValue]] = TypeAdapter(dict[str, JsonValue])


def validate_values(values: Any) -> dict[str, JsonValue]:
    """Validate a caller-supplied mapping of JSON values and return a fresh dict."""
    try:
        return _MAPPING_ADAPTER.validate_python(values)
    except ValidationError as e:
        raise InvalidArgumentError(f"values must be a mapping of JSON values: {e}", cause=e) from e


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class JsonDocument(DocumentStore):
    """
    Mutable key/value view over a flat JSON object.

    Subclasses supply `load()` and `save()`. All other operations work on the
    in-memory mapping only; nothing reaches the backing store until `save()`
    or `close()` runs. Use as a context manager to flush on scope exit:

        with FileDocument("state.json") as doc:
            doc.increment("runs")
    """

    def __init__(self, values: Mapping[str, Any] | None = None, *, settings: Settings | None = None):
        self._settings = settings or get_settings()
        self._data: dict[str, Any] = validate_values(values) if values is not None else self.load()
        self._closed = False

    # Backing store hooks

    def load(self) -> dict[str, JsonValue]:
        raise NotImplementedError

    def save(self) -> None:
        raise NotImplementedError

    # Lifecycle

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Save once; later calls do nothing."""
        if self._closed:
            return
        self._closed = True
        self.save()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        # Construction may have failed before `_closed` was set.
        if getattr(self, "_closed", True) or not self._settings.autosave:
            return
        try:
            self.close()
        except Exception:
            logger.exception("JSON DOCUMENT: save on collect failed for %s", type(self).__name__)

    # Single entries

    def put(self, name: str | Mapping[str, Any], value: Any = None):
        if isinstance(name, Mapping):
            bad = [k for k in name if not isinstance(k, str)]
            if bad:
                raise InvalidArgumentError(f"keys must be strings, got {bad[0]!r}")
            self._data.update(name)
        elif isinstance(name, str):
            self._data[name] = value
        else:
            raise InvalidArgumentError(f"key must be a string or a mapping, got {type(name).__name__}")
        return self

    def push(self, name: str, value: Any):
        return self.put(name, _as_list(self.get(name, [])) + _as_list(value))

    def prepend(self, name: str, value: Any):
        return self.put(name, _as_list(value) + _as_list(self.get(name, [])))

    def get(self, name: str, default: Any = None) -> Any:
        return self._data.get(name, default)

    def has(self, name: str) -> bool:
        return name in self._data

    def forget(self, key: str):
        self._data.pop(key, None)
        return self

    def pull(self, name: str) -> Any:
        return self._data.pop(name, None)

    def increment(self, name: str, by: int | float = 1) -> int | float:
        current = self.get(name, 0)
        if not _is_number(current):
            raise InvalidValueType(f"The value for '{name}' is not a number.")
        new_value = current + by
        self.put(name, new_value)
        return new_value

    def decrement(self, name: str, by: int | float = 1) -> int | float:
        return self.increment(name, -by)

    # Whole mapping

    def all(self) -> dict[str, Any]:
        return dict(self._data)

    def starting_with(self, prefix: str = "") -> dict[str, Any]:
        return {k: v for k, v in self._data.items() if k.startswith(prefix)}

    def flush(self):
        self._data = {}
        return self

    def flush_starting_with(self, prefix: str = ""):
        if prefix == "":
            return self.flush()
        self._data = {k: v for k, v in self._data.items() if not k.startswith(prefix)}
        return self

    def keys(self) -> list[str]:
        return list(self._data)

    def values(self) -> list[Any]:
        return list(self._data.values())

    def count(self) -> int:
        return len(self._data)

    # Bulk operations, applied in insertion order

    def each(self, callback: Callable[[str, Any], Any]):
        for key, value in list(self._data.items()):
            callback(key, value)
        return self

    def map(self, callback: Callable[[Any], Any]):
        self._data = {k: callback(v) for k, v in self._data.items()}
        return self

    def filter(self, predicate: Callable[[Any, str], Any]):
        self._data = {k: v for k, v in self._data.items() if predicate(v, k)}
        return self

    def reduce(self, callback: Callable[[Any, Any], Any], initial: Any = None) -> Any:
        return functools.reduce(callback, self._data.values(), initial)

    def sort(self, comparator: Callable[[Any, Any], int]):
        key = functools.cmp_to_key(lambda a, b: comparator(a[1], b[1]))
        self._data = dict(sorted(self._data.items(), key=key))
        return self

    def reverse(self):
        self._data = dict(reversed(list(self._data.items())))
        return self

    # Serialization

    def to_json(self, options: JsonOptions | None = None, **overrides: Any) -> str:
        opts = options or self._settings.json_options()
        if overrides:
            opts = opts.model_copy(update=overrides)
        try:
            return encode(self._data, opts)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"failed to encode: {e}", cause=e) from e

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    # Indexed access

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.put(name, value)

    def __delitem__(self, name: str) -> None:
        self.forget(name)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
