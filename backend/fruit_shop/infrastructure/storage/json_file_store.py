"""Key-value store persisted as a single JSON object on the local filesystem.

Storage layout:
    <path>  = {"users": "<json>", "currentUser": "<json>", "orders": "<json>", ...}

Values are the raw strings handed to ``set``; the file is rewritten
atomically (temp file + rename) after every change.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from fruit_shop.application.interfaces import KeyValueStore
from fruit_shop.domain.exceptions import CorruptRecordError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """Infrastructure adapter for file-backed local storage."""

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._data = self._read()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        """Load the file, returning {} if it does not exist yet."""
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except json.JSONDecodeError as exc:
            raise CorruptRecordError(str(self._path), str(exc)) from exc
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            raise CorruptRecordError(str(self._path), "expected an object of string values")
        logger.debug("Loaded %d key(s) from %s", len(data), self._path)
        return data

    def _write(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(self._data, tmp, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._write()
        logger.debug("set %s in %s", key, self._path)

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._write()
            logger.debug("removed %s from %s", key, self._path)
