from __future__ import annotations

import os
from pathlib import Path
import sys

import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Strip JSONDOC_* variables so every test starts from the default settings.
    """
    for name in list(os.environ):
        if name.startswith("JSONDOC_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def json_path(tmp_path: Path) -> Path:
    return tmp_path / "doc.json"


@pytest.fixture
def person():
    from jsondoc import StringDocument

    return StringDocument('{"name": "John", "age": 30}')
