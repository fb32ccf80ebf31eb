from .memory_store import InMemoryKeyValueStore
from .json_file_store import JsonFileKeyValueStore
from .basket import StoreBasketClearer

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "StoreBasketClearer",
]
