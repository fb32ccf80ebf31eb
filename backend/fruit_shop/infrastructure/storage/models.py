"""Pydantic storage models: the JSON shape of each store partition.

Keys are camelCase (``firstName``, ``orderIds``, ``statusHistory``) to match
what the storefront pages read from local storage.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from fruit_shop.domain.exceptions import CorruptRecordError

USERS_KEY = "users"
SESSION_KEY = "currentUser"
ORDERS_KEY = "orders"


class StoredModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SessionUserModel(StoredModel):
    id: str
    email: str
    first_name: str
    last_name: str
    phone: str = ""
    address: str = ""
    created_at: datetime
    order_ids: list[str] = []


class UserRecordModel(SessionUserModel):
    credential_hash: str


class StatusChangeModel(StoredModel):
    status: str
    timestamp: datetime
    message: str


class OrderRecordModel(StoredModel):
    id: str
    user_id: str
    items: list[str]
    delivery_details: Any = None
    status: str
    order_date: datetime
    estimated_delivery: datetime | None = None
    total: Decimal
    status_history: list[StatusChangeModel]


user_list_adapter = TypeAdapter(list[UserRecordModel])
order_list_adapter = TypeAdapter(list[OrderRecordModel])
session_adapter = TypeAdapter(SessionUserModel)


def decode_partition(adapter: TypeAdapter, raw: str, partition: str) -> Any:
    """Validate a stored JSON blob, mapping failures to CorruptRecordError."""
    try:
        return adapter.validate_json(raw)
    except ValidationError as exc:
        raise CorruptRecordError(partition, f"{exc.error_count()} validation error(s)") from exc
