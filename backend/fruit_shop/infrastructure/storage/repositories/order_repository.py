"""Concrete order repository backed by a KeyValueStore."""

import logging

from fruit_shop.application.interfaces import KeyValueStore, OrderRepository
from fruit_shop.domain.entities import OrderRecord, StatusChange, parse_status
from fruit_shop.infrastructure.storage.models import (
    ORDERS_KEY,
    OrderRecordModel,
    StatusChangeModel,
    decode_partition,
    order_list_adapter,
)

logger = logging.getLogger(__name__)


class KeyValueOrderRepository(OrderRepository):
    """Implements the OrderRepository port as one JSON array under ``orders``."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _to_entity(self, model: OrderRecordModel) -> OrderRecord:
        """Map storage model → domain entity."""
        return OrderRecord(
            id=model.id,
            user_id=model.user_id,
            items=list(model.items),
            delivery_details=model.delivery_details,
            total=model.total,
            order_date=model.order_date,
            estimated_delivery=model.estimated_delivery,
            status=parse_status(model.status),
            status_history=[
                StatusChange(
                    status=parse_status(change.status),
                    timestamp=change.timestamp,
                    message=change.message,
                )
                for change in model.status_history
            ],
        )

    def _to_model(self, entity: OrderRecord) -> OrderRecordModel:
        """Map domain entity → storage model."""
        return OrderRecordModel(
            id=entity.id,
            user_id=entity.user_id,
            items=list(entity.items),
            delivery_details=entity.delivery_details,
            status=entity.status.value,
            order_date=entity.order_date,
            estimated_delivery=entity.estimated_delivery,
            total=entity.total,
            status_history=[
                StatusChangeModel(
                    status=change.status.value,
                    timestamp=change.timestamp,
                    message=change.message,
                )
                for change in entity.status_history
            ],
        )

    def load_all(self) -> list[OrderRecord]:
        raw = self._store.get(ORDERS_KEY)
        if raw is None:
            return []
        models = decode_partition(order_list_adapter, raw, ORDERS_KEY)
        return [self._to_entity(m) for m in models]

    def save_all(self, orders: list[OrderRecord]) -> None:
        payload = order_list_adapter.dump_json(
            [self._to_model(o) for o in orders], by_alias=True
        )
        self._store.set(ORDERS_KEY, payload.decode("utf-8"))
        logger.debug("Saved %d order(s)", len(orders))
