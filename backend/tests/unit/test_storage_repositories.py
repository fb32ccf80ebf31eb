"""Unit tests for the key-value backed repositories and their JSON layout."""

import json
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from fruit_shop.domain.entities import CustomStatus, OrderRecord, OrderStatus, UserRecord
from fruit_shop.domain.exceptions import CorruptRecordError
from fruit_shop.infrastructure.storage import InMemoryKeyValueStore
from fruit_shop.infrastructure.storage.repositories import (
    KeyValueOrderRepository,
    KeyValueSessionRepository,
    KeyValueUserRepository,
)

CREATED = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


def _users() -> list[UserRecord]:
    return [
        UserRecord(
            id="1714554000000",
            email="jane@example.com",
            credential_hash="c2VjcmV0",
            first_name="Jane",
            last_name="Doe",
            created_at=CREATED,
            order_ids=["ORD-1", "ORD-2"],
        ),
        UserRecord(
            id="1714554000001",
            email="sam@example.com",
            credential_hash="c2FtIQ==",
            first_name="Sam",
            last_name="Roe",
            phone="555-0100",
            address="2 Grove St",
            created_at=CREATED + timedelta(days=1),
        ),
    ]


def _orders() -> list[OrderRecord]:
    order = OrderRecord(
        id="ORD-1",
        user_id="1714554000000",
        items=["apple", "bundle_x"],
        delivery_details={"address": "1 Orchard Lane", "notes": ["ring twice"], "tip": 2},
        total=Decimal("11.98"),
        order_date=CREATED,
        estimated_delivery=CREATED + timedelta(hours=2),
    )
    order.advance(OrderStatus.CONFIRMED, at=CREATED + timedelta(minutes=5))
    order.advance("held_at_depot", "Weather delay", at=CREATED + timedelta(minutes=40))
    return [order]


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


def test_users_round_trip(store):
    repo = KeyValueUserRepository(store)
    users = _users()

    repo.save_all(users)

    assert repo.load_all() == users


def test_users_stored_with_camel_case_keys(store):
    KeyValueUserRepository(store).save_all(_users())

    first = json.loads(store.get("users"))[0]
    assert first["firstName"] == "Jane"
    assert first["credentialHash"] == "c2VjcmV0"
    assert first["orderIds"] == ["ORD-1", "ORD-2"]
    assert "createdAt" in first


def test_orders_round_trip_including_custom_status(store):
    repo = KeyValueOrderRepository(store)
    orders = _orders()

    repo.save_all(orders)
    loaded = repo.load_all()

    assert loaded == orders
    assert loaded[0].status == CustomStatus("held_at_depot")
    assert loaded[0].status_history[1].status is OrderStatus.CONFIRMED


def test_orders_stored_layout(store):
    KeyValueOrderRepository(store).save_all(_orders())

    stored = json.loads(store.get("orders"))[0]
    assert stored["userId"] == "1714554000000"
    assert stored["status"] == "held_at_depot"
    assert [h["status"] for h in stored["statusHistory"]] == [
        "pending", "confirmed", "held_at_depot",
    ]
    assert Decimal(stored["total"]) == Decimal("11.98")


def test_empty_partitions(store):
    assert KeyValueUserRepository(store).load_all() == []
    assert KeyValueOrderRepository(store).load_all() == []
    assert KeyValueSessionRepository(store).load() is None


def test_session_round_trip_and_clear(store):
    repo = KeyValueSessionRepository(store)
    session = _users()[0].to_session()

    repo.save(session)
    assert repo.load() == session

    repo.clear()
    assert repo.load() is None


@pytest.mark.parametrize("raw", ["not json", '{"id": 1}', '[{"id": "ORD-1"}]'])
def test_corrupt_orders_partition(store, raw):
    store.set("orders", raw)

    with pytest.raises(CorruptRecordError) as exc_info:
        KeyValueOrderRepository(store).load_all()

    assert exc_info.value.partition == "orders"
