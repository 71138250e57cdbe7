from __future__ import annotations

import json
import logging
import os
from pathlib import Path
import tempfile

from .errors import NoteStoreError

log = logging.getLogger(__name__)

NOTE_KEY_PREFIX = "user_recipe_"


def note_key(recipe_id: str) -> str:
    return f"{NOTE_KEY_PREFIX}{recipe_id}"


class NoteStore:
    """String key-value store backed by a single JSON file.

    Every ``set`` rewrites the whole file through a temporary file and
    ``os.replace``, so the value is on disk when the call returns.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get(self, key: str) -> str:
        value = self._read().get(key, "")
        return value if isinstance(value, str) else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        log.debug("Saved %s (%d chars) to %s", key, len(value), self.path)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise NoteStoreError(f"Failed to read notes: {self.path}") from exc
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise NoteStoreError(f"Invalid JSON in notes: {self.path}") from exc
        if not isinstance(data, dict):
            raise NoteStoreError(f"{self.path}: notes must be a JSON object")
        return data

    def _write(self, data: dict[str, object]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".notes-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh, ensure_ascii=False, indent=2, sort_keys=True)
                    fh.flush()
                    os.fsync(fh.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise NoteStoreError(f"Failed to write notes: {self.path}") from exc


def load_note(store: NoteStore, recipe_id: str) -> str:
    return store.get(note_key(recipe_id))


def save_note(store: NoteStore, recipe_id: str, text: str) -> None:
    store.set(note_key(recipe_id), text)
