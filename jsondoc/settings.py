from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .json_codec import JsonOptions


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    return int(raw)


@dataclass(frozen=True)
class Settings:
    # Encoding
    indent: int | None
    sort_keys: bool
    ensure_ascii: bool

    # Lifecycle: flush unclosed documents when they are garbage collected
    autosave: bool

    # FileDocument
    create_dirs: bool

    def json_options(self) -> JsonOptions:
        return JsonOptions(indent=self.indent, sort_keys=self.sort_keys, ensure_ascii=self.ensure_ascii)


def get_settings() -> Settings:
    return Settings(
        indent=_env_int("JSONDOC_INDENT"),
        sort_keys=_env_bool("JSONDOC_SORT_KEYS", False),
        ensure_ascii=_env_bool("JSONDOC_ENSURE_ASCII", True),
        autosave=_env_bool("JSONDOC_AUTOSAVE", True),
        create_dirs=_env_bool("JSONDOC_CREATE_DIRS", True),
    )


def load_settings(env_file: str | os.PathLike[str] | None = None) -> Settings:
    """Read `env_file` (or a `.env` found from the cwd) into the environment, then build Settings."""
    load_dotenv(env_file)
    return get_settings()
