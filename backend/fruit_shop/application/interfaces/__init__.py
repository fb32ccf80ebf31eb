from .key_value_store import KeyValueStore
from .user_repository import SessionRepository, UserRepository
from .order_repository import OrderRepository
from .credential_hasher import CredentialHasher
from .basket_clearer import BasketClearer
from .session_view import SessionView

__all__ = [
    "KeyValueStore",
    "SessionRepository",
    "UserRepository",
    "OrderRepository",
    "CredentialHasher",
    "BasketClearer",
    "SessionView",
]
