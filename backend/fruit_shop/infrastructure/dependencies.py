"""Composition root: wires infrastructure adapters to the application services."""

from dataclasses import dataclass
from datetime import timedelta

from fruit_shop.application.interfaces import CredentialHasher, KeyValueStore
from fruit_shop.application.services import (
    AccountDirectory,
    OrderLedger,
    OrderProgressSimulator,
    StampIdGenerator,
)
from fruit_shop.application.services.identifiers import Clock, utc_now
from fruit_shop.config import Settings, get_settings
from fruit_shop.domain.entities import PriceList
from fruit_shop.infrastructure.security import LegacyCredentialHasher, Pbkdf2CredentialHasher
from fruit_shop.infrastructure.storage import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    StoreBasketClearer,
)
from fruit_shop.infrastructure.storage.repositories import (
    KeyValueOrderRepository,
    KeyValueSessionRepository,
    KeyValueUserRepository,
)


@dataclass
class FruitShop:
    """Everything a UI layer needs, built around one shared store."""

    store: KeyValueStore
    directory: AccountDirectory
    ledger: OrderLedger
    progress: OrderProgressSimulator


def build_key_value_store(settings: Settings) -> KeyValueStore:
    """Provides the store selected by ``storage_backend``."""
    backend = settings.storage_backend.lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "file":
        return JsonFileKeyValueStore(settings.storage_path)
    raise ValueError(f"Unknown storage backend '{settings.storage_backend}'")


def build_credential_hasher(settings: Settings) -> CredentialHasher:
    """Provides the hasher selected by ``credential_scheme``."""
    scheme = settings.credential_scheme.lower()
    if scheme == "legacy":
        return LegacyCredentialHasher(salt=settings.credential_salt)
    if scheme == "pbkdf2":
        return Pbkdf2CredentialHasher(iterations=settings.pbkdf2_iterations)
    raise ValueError(f"Unknown credential scheme '{settings.credential_scheme}'")


def build_price_list(settings: Settings) -> PriceList:
    return PriceList(
        unit_prices=dict(settings.unit_prices),
        default_price=settings.default_item_price,
        bundle_price=settings.bundle_price,
        bundle_prefix=settings.bundle_prefix,
    )


def build_fruit_shop(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
    clock: Clock = utc_now,
) -> FruitShop:
    """Build a fully wired FruitShop; ``store`` overrides the configured backend."""
    settings = settings or get_settings()
    store = store if store is not None else build_key_value_store(settings)
    ids = StampIdGenerator(clock)

    directory = AccountDirectory(
        users=KeyValueUserRepository(store),
        sessions=KeyValueSessionRepository(store),
        hasher=build_credential_hasher(settings),
        clock=clock,
        ids=ids,
    )
    ledger = OrderLedger(
        orders=KeyValueOrderRepository(store),
        directory=directory,
        basket=StoreBasketClearer(store, key=settings.basket_key),
        prices=build_price_list(settings),
        delivery_window=timedelta(minutes=settings.delivery_window_minutes),
        clock=clock,
        ids=ids,
    )
    progress = OrderProgressSimulator(
        ledger,
        initial_delay=settings.progress_initial_delay_seconds,
        interval=settings.progress_step_interval_seconds,
    )
    return FruitShop(store=store, directory=directory, ledger=ledger, progress=progress)
