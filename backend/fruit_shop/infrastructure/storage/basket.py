"""Basket clearer that drops the storefront's basket entry from the shared store."""

import logging

from fruit_shop.application.interfaces import BasketClearer, KeyValueStore

logger = logging.getLogger(__name__)


class StoreBasketClearer(BasketClearer):
    """Removes ``key`` from the store once an order has been placed."""

    def __init__(self, store: KeyValueStore, key: str = "basket"):
        self._store = store
        self._key = key

    def clear(self) -> None:
        self._store.remove(self._key)
        logger.debug("Cleared basket '%s'", self._key)
