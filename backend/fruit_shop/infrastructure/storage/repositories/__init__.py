from .user_repository import KeyValueSessionRepository, KeyValueUserRepository
from .order_repository import KeyValueOrderRepository

__all__ = [
    "KeyValueSessionRepository",
    "KeyValueUserRepository",
    "KeyValueOrderRepository",
]
