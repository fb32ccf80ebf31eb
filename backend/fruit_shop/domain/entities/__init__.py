from .user_account import SessionUser, UserRecord
from .order import (
    GENERIC_STATUS_MESSAGE,
    ORDER_PLACED_MESSAGE,
    CustomStatus,
    OrderRecord,
    OrderStatus,
    Status,
    StatusChange,
    parse_status,
)
from .price_list import PriceList

__all__ = [
    "SessionUser",
    "UserRecord",
    "GENERIC_STATUS_MESSAGE",
    "ORDER_PLACED_MESSAGE",
    "CustomStatus",
    "OrderRecord",
    "OrderStatus",
    "Status",
    "StatusChange",
    "parse_status",
    "PriceList",
]
