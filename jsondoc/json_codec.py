from __future__ import annotations

import json
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


class JsonOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    indent: int | None = None
    sort_keys: bool = False
    ensure_ascii: bool = True


COMPACT = JsonOptions()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


def decode(text: str) -> dict[str, Any]:
    """
    Parse a JSON document whose top level is an object.

    Blank text yields an empty dict. A top-level array becomes a dict keyed by
    the decimal index of each element. Raises ValueError for anything else.
    """
    if not text.strip():
        return {}
    doc = json.loads(text, parse_constant=_reject_constant)
    if isinstance(doc, dict):
        return doc
    if isinstance(doc, list):
        return {str(i): v for i, v in enumerate(doc)}
    raise ValueError(f"expected a JSON object, got {type(doc).__name__}")


def encode(payload: Mapping[str, Any] | list[Any], options: JsonOptions | None = None) -> str:
    """Serialize `payload`. Raises TypeError/ValueError when it holds non-JSON content."""
    opts = options or COMPACT
    separators = (",", ":") if opts.indent is None else (",", ": ")
    return json.dumps(
        payload,
        indent=opts.indent,
        sort_keys=opts.sort_keys,
        ensure_ascii=opts.ensure_ascii,
        separators=separators,
        allow_nan=False,
    )
