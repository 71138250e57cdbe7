from __future__ import annotations

import json
from pathlib import Path

import pytest

from brewbook import notes as notes_module
from brewbook.errors import NoteStoreError
from brewbook.notes import NoteStore, load_note, note_key, save_note


# Purpose: verify the note key format.
def test_note_key() -> None:
    assert note_key("latte") == "user_recipe_latte"


# Purpose: verify missing files and keys read as empty.
def test_get_defaults_empty(tmp_path: Path) -> None:
    store = NoteStore(tmp_path / "notes.json")
    assert store.get("user_recipe_latte") == ""
    (tmp_path / "notes.json").write_text("", encoding="utf-8")
    assert store.get("user_recipe_latte") == ""


# Purpose: verify writes are durable and last write wins.
def test_set_overwrites(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "notes.json"
    store = NoteStore(path)
    save_note(store, "latte", "first")
    save_note(store, "latte", "second\nline")
    save_note(store, "mocha", "  keep spacing  ")

    assert load_note(NoteStore(path), "latte") == "second\nline"
    assert load_note(store, "mocha") == "  keep spacing  "
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"user_recipe_latte": "second\nline", "user_recipe_mocha": "  keep spacing  "}
    assert [p.name for p in path.parent.iterdir()] == ["notes.json"]


# Purpose: verify non-ASCII text survives a round trip through the file.
def test_unicode_note(tmp_path: Path) -> None:
    store = NoteStore(tmp_path / "notes.json")
    save_note(store, "cafe_bombon", "Kahve ☕ çok güzel")
    assert load_note(store, "cafe_bombon") == "Kahve ☕ çok güzel"


# Purpose: verify non-string stored values are returned as text.
def test_get_coerces_values(tmp_path: Path) -> None:
    path = tmp_path / "notes.json"
    path.write_text(json.dumps({"user_recipe_x": 3}), encoding="utf-8")
    assert NoteStore(path).get("user_recipe_x") == "3"


# Purpose: verify corrupt files raise NoteStoreError.
@pytest.mark.parametrize("content", ["{bad", "[1, 2]"])
def test_corrupt_file(tmp_path: Path, content: str) -> None:
    path = tmp_path / "notes.json"
    path.write_text(content, encoding="utf-8")
    store = NoteStore(path)
    with pytest.raises(NoteStoreError):
        store.get("user_recipe_x")
    with pytest.raises(NoteStoreError):
        store.set("user_recipe_x", "y")


# Purpose: verify unwritable locations raise NoteStoreError.
def test_write_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a dir", encoding="utf-8")
    store = NoteStore(blocker / "notes.json")
    with pytest.raises(NoteStoreError):
        store.set("user_recipe_x", "y")


# Purpose: verify unreadable files raise NoteStoreError.
def test_read_failure(tmp_path: Path) -> None:
    path = tmp_path / "notes.json"
    path.mkdir()
    with pytest.raises(NoteStoreError):
        NoteStore(path).get("user_recipe_x")


# Purpose: verify a failed replace leaves no temporary file behind.
def test_replace_failure_cleans_up(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "notes.json"
    store = NoteStore(path)
    save_note(store, "latte", "kept")

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(notes_module.os, "replace", broken_replace)
    with pytest.raises(NoteStoreError):
        save_note(store, "latte", "lost")
    monkeypatch.undo()

    assert sorted(p.name for p in tmp_path.iterdir()) == ["notes.json"]
    assert load_note(store, "latte") == "kept"
