"""Bounded, most-recent-first history of analyses and practice sessions.

Each HistoryStore owns one key in a persistence backend and rewrites the
whole list on every append/remove. The read-modify-write is not
transactional: two writers sharing a backend can lose each other's updates.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Generic, Protocol, TypeVar

import pydantic
from pydantic import TypeAdapter

from services.errors import StorageReadError

logger = logging.getLogger(__name__)

ANALYSIS_KEY = "resumatch_history"
INTERVIEW_KEY = "resumatch_interviews"
DEFAULT_LIMIT = 20

ItemT = TypeVar("ItemT", bound=pydantic.BaseModel)


class HistoryBackend(Protocol):
    def read(self, key: str) -> str | None:
        """Return the serialized list stored under key, or None if absent."""

    def write(self, key: str, data: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryBackend:
    """Process-local backend, used in tests and when no history dir is wanted."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def read(self, key: str) -> str | None:
        return self._data.get(key)

    def write(self, key: str, data: str) -> None:
        self._data[key] = data

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileBackend:
    """Stores each key as <directory>/<key>.json."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def read(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"Could not read {path}: {e}") from e

    def write(self, key: str, data: str) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        # Replace atomically via a sibling temp file
        fd, tmp_path = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(data)
            os.replace(tmp_path, self._path(key))
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class HistoryStore(Generic[ItemT]):
    """Most-recent-first list of items with an ``id`` field, capped at ``limit``."""

    def __init__(
        self,
        backend: HistoryBackend,
        key: str,
        item_model: type[ItemT],
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._backend = backend
        self._key = key
        self._limit = limit
        self._adapter = TypeAdapter(list[item_model])

    @property
    def key(self) -> str:
        return self._key

    def _load(self) -> list[ItemT]:
        raw = self._backend.read(self._key)
        if raw is None:
            return []
        try:
            return self._adapter.validate_json(raw)
        except pydantic.ValidationError as e:
            raise StorageReadError(f"Corrupt history under {self._key!r}: {e}") from e

    def _save(self, items: list[ItemT]) -> None:
        self._backend.write(self._key, self._adapter.dump_json(items).decode("utf-8"))

    def list(self) -> list[ItemT]:
        """Return stored items, newest first. Unreadable state reads as empty."""
        try:
            return self._load()
        except StorageReadError as e:
            logger.warning("Treating history %r as empty: %s", self._key, e)
            return []

    def append(self, item: ItemT) -> None:
        updated = [item, *self.list()][: self._limit]
        self._save(updated)
        logger.info("Saved %s to %r (%d entries)", item.id, self._key, len(updated))

    def remove(self, item_id: str) -> list[ItemT]:
        updated = [item for item in self.list() if item.id != item_id]
        self._save(updated)
        return updated

    def clear(self) -> None:
        self._backend.delete(self._key)
