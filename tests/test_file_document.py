from __future__ import annotations

import json

import pytest

from jsondoc import DocumentError, FileDocument, ParseError, SerializationError, get_settings


def test_missing_file_loads_empty(json_path):
    doc = FileDocument(json_path)
    assert doc.all() == {}
    assert doc.path == json_path


def test_roundtrip(json_path):
    values = {"name": "John", "age": 30, "tags": ["a", "b"], "meta": {"ok": True, "none": None}}
    FileDocument(json_path, values).save()

    assert json.loads(json_path.read_text(encoding="utf-8")) == values
    assert FileDocument(json_path).all() == values


def test_save_overwrites_previous_contents(json_path):
    json_path.write_text('{"old": 1, "keep": 2}', encoding="utf-8")
    doc = FileDocument(json_path)
    doc.forget("old").put("new", 3)
    doc.save()
    assert json.loads(json_path.read_text(encoding="utf-8")) == {"keep": 2, "new": 3}


def test_saving_empty_mapping_deletes_file(json_path):
    json_path.write_text('{"a": 1}', encoding="utf-8")
    doc = FileDocument(json_path)
    doc.flush().save()
    assert not json_path.exists()

    # Nothing to delete is fine too.
    doc.save()
    assert not json_path.exists()


def test_empty_file_loads_empty(json_path):
    json_path.write_text("", encoding="utf-8")
    assert FileDocument(json_path).all() == {}


def test_invalid_json_raises_with_path(json_path):
    json_path.write_text("{broken", encoding="utf-8")
    with pytest.raises(ParseError, match="failed to load from") as exc_info:
        FileDocument(json_path)
    assert str(json_path) in str(exc_info.value)
    assert exc_info.value.source == str(json_path)


def test_invalid_utf8_raises_parse_error(json_path):
    json_path.write_bytes(b'{"a": "\xb1\x31"}')
    with pytest.raises(ParseError):
        FileDocument(json_path)


def test_unencodable_value_raises_and_keeps_file(json_path):
    json_path.write_text('{"a": 1}', encoding="utf-8")
    doc = FileDocument(json_path)
    doc.put("blob", b"\xb1\x31")
    with pytest.raises(SerializationError, match="failed to save to"):
        doc.save()
    assert json_path.read_text(encoding="utf-8") == '{"a": 1}'
    doc.forget("blob")


def test_save_creates_parent_dirs(tmp_path):
    path = tmp_path / "nested" / "dir" / "doc.json"
    FileDocument(path, {"a": 1}).save()
    assert path.exists()


def test_save_without_create_dirs_fails(tmp_path, monkeypatch):
    monkeypatch.setenv("JSONDOC_CREATE_DIRS", "0")
    path = tmp_path / "nested" / "doc.json"
    doc = FileDocument(path, {"a": 1}, settings=get_settings())
    with pytest.raises(DocumentError, match="failed to save to"):
        doc.save()
    doc.flush()


def test_settings_control_file_format(json_path, monkeypatch):
    monkeypatch.setenv("JSONDOC_INDENT", "2")
    monkeypatch.setenv("JSONDOC_SORT_KEYS", "true")
    monkeypatch.setenv("JSONDOC_ENSURE_ASCII", "false")
    FileDocument(json_path, {"b": "é", "a": 1}).save()
    assert json_path.read_text(encoding="utf-8") == '{\n  "a": 1,\n  "b": "é"\n}'


def test_top_level_array_file_loads_by_index(json_path):
    json_path.write_text('["x", "y"]', encoding="utf-8")
    doc = FileDocument(json_path)
    assert doc.all() == {"0": "x", "1": "y"}
    doc.flush()
