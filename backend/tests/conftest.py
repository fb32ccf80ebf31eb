"""Shared fixtures: a controllable clock and services over an in-memory store."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from fruit_shop.application.schemas import RegistrationRequest
from fruit_shop.application.services import AccountDirectory, OrderLedger, StampIdGenerator
from fruit_shop.domain.entities import PriceList
from fruit_shop.infrastructure.security import LegacyCredentialHasher
from fruit_shop.infrastructure.storage import InMemoryKeyValueStore, StoreBasketClearer
from fruit_shop.infrastructure.storage.repositories import (
    KeyValueOrderRepository,
    KeyValueSessionRepository,
    KeyValueUserRepository,
)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


PRICES = PriceList(
    unit_prices={
        "apple": Decimal("2.99"),
        "banana": Decimal("1.99"),
        "lemon": Decimal("3.49"),
        "pear": Decimal("3.29"),
    },
    default_price=Decimal("2.99"),
    bundle_price=Decimal("8.99"),
)


def make_registration(email: str = "jane@example.com", **overrides) -> RegistrationRequest:
    data = {
        "email": email,
        "password": "s3cret",
        "first_name": "Jane",
        "last_name": "Doe",
    }
    data.update(overrides)
    return RegistrationRequest(**data)


def build_directory(store, clock, ids) -> AccountDirectory:
    return AccountDirectory(
        users=KeyValueUserRepository(store),
        sessions=KeyValueSessionRepository(store),
        hasher=LegacyCredentialHasher(),
        clock=clock,
        ids=ids,
    )


def build_ledger(store, directory, clock, ids) -> OrderLedger:
    return OrderLedger(
        orders=KeyValueOrderRepository(store),
        directory=directory,
        basket=StoreBasketClearer(store),
        prices=PRICES,
        clock=clock,
        ids=ids,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def ids(clock: FakeClock) -> StampIdGenerator:
    return StampIdGenerator(clock)


@pytest.fixture
def directory(store, clock, ids) -> AccountDirectory:
    return build_directory(store, clock, ids)


@pytest.fixture
def ledger(store, directory, clock, ids) -> OrderLedger:
    return build_ledger(store, directory, clock, ids)


@pytest.fixture
def logged_in(directory: AccountDirectory) -> AccountDirectory:
    directory.register(make_registration())
    directory.login("jane@example.com", "s3cret")
    return directory
