"""Persisted set of bookmarked employee ids.

The store sits on a small key/value storage port so tests can swap the
JSON file for an in-memory dict. Every mutation rewrites the whole set under
one key as a JSON array of ints.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "hr-bookmarks"


class KeyValueStorage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStorage:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStorage:
    """All keys in a single JSON object file, replaced atomically on write."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError:
            logger.exception("Failed to read storage file %s", self.path)
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Storage file %s is not valid JSON — treating as empty", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object — treating as empty", self.path)
            return {}
        return data

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            logger.warning("Storage key '%s' in %s does not hold a string — treating as empty", key, self.path)
            return None
        return value

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(data, tmp)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def _parse_ids(raw: str | None) -> list[int] | None:
    if raw is None:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, list):
        return None
    # bool is an int subclass but never a valid id
    if not all(isinstance(item, int) and not isinstance(item, bool) for item in data):
        return None
    return list(dict.fromkeys(data))


class BookmarkStore:
    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key
        self._ids: dict[int, None] = {}
        self.reload()

    def reload(self) -> None:
        ids = _parse_ids(self.storage.get(self.key))
        if ids is None:
            logger.warning("Bookmark data under key '%s' is corrupt — starting with no bookmarks", self.key)
            ids = []
        self._ids = dict.fromkeys(ids)

    def _commit(self, ids: dict[int, None]) -> None:
        # Memory only changes once storage accepted the write
        self.storage.set(self.key, json.dumps(list(ids)))
        self._ids = ids

    def add(self, employee_id: int) -> None:
        if employee_id in self._ids:
            return
        candidate = dict(self._ids)
        candidate[employee_id] = None
        self._commit(candidate)

    def remove(self, employee_id: int) -> None:
        candidate = dict(self._ids)
        candidate.pop(employee_id, None)
        self._commit(candidate)

    def has(self, employee_id: int) -> bool:
        return employee_id in self._ids

    def all(self) -> list[int]:
        return list(self._ids)

    @property
    def count(self) -> int:
        return len(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._ids
