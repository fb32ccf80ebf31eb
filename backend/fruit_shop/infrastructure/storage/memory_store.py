"""In-process key-value store. Nothing survives the process."""

import logging

from fruit_shop.application.interfaces import KeyValueStore

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """Infrastructure adapter keeping every value in a dict."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        logger.debug("set %s (%d chars)", key, len(value))
        self._data[key] = value

    def remove(self, key: str) -> None:
        logger.debug("remove %s", key)
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)
