"""Integration tests for the composition root over a file-backed store."""

from decimal import Decimal

import pytest

from fruit_shop.application.schemas import ProfileUpdate, RegistrationRequest
from fruit_shop.config import Settings
from fruit_shop.domain.entities import OrderStatus
from fruit_shop.infrastructure.dependencies import (
    build_credential_hasher,
    build_fruit_shop,
    build_key_value_store,
)
from fruit_shop.infrastructure.security import Pbkdf2CredentialHasher
from fruit_shop.infrastructure.storage import InMemoryKeyValueStore, JsonFileKeyValueStore


@pytest.fixture
def file_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        storage_backend="file",
        storage_path=str(tmp_path / "local_storage.json"),
    )


def _register_and_login(shop) -> None:
    shop.directory.register(
        RegistrationRequest(
            email="jane@example.com",
            password="s3cret",
            first_name="Jane",
            last_name="Doe",
        )
    )
    shop.directory.login("jane@example.com", "s3cret")


def test_shop_state_survives_restart(file_settings):
    shop = build_fruit_shop(file_settings)
    assert isinstance(shop.store, JsonFileKeyValueStore)

    _register_and_login(shop)
    shop.store.set("basket", '["apple", "bundle_x"]')
    order = shop.ledger.create_order(["apple", "bundle_x"], {"address": "1 Orchard Lane"})
    shop.ledger.advance_status(order.id, "confirmed")
    shop.directory.update_profile(ProfileUpdate(phone="555-0100"))

    restarted = build_fruit_shop(file_settings)

    assert restarted.directory.is_authenticated() is True
    assert restarted.directory.current_user().phone == "555-0100"
    [reloaded] = restarted.ledger.orders_for_current_user()
    assert reloaded.id == order.id
    assert reloaded.total == Decimal("11.98")
    assert reloaded.status is OrderStatus.CONFIRMED
    assert restarted.store.get("basket") is None
    assert restarted.directory.get_user(reloaded.user_id).order_ids == [order.id]


@pytest.mark.asyncio
async def test_progress_simulation_through_wired_shop():
    settings = Settings(
        _env_file=None,
        progress_initial_delay_seconds=0,
        progress_step_interval_seconds=0,
    )
    shop = build_fruit_shop(settings, store=InMemoryKeyValueStore())
    _register_and_login(shop)
    order = shop.ledger.create_order(["pear"], None)

    simulation = shop.progress.simulate(order.id).start()
    await simulation.wait()

    assert shop.ledger.get_order(order.id).status is OrderStatus.DELIVERED


def test_pbkdf2_scheme_is_wired():
    settings = Settings(_env_file=None, credential_scheme="pbkdf2", pbkdf2_iterations=1_000)

    assert isinstance(build_credential_hasher(settings), Pbkdf2CredentialHasher)

    shop = build_fruit_shop(settings, store=InMemoryKeyValueStore())
    _register_and_login(shop)
    [user] = shop.directory.list_users()
    assert user.credential_hash.startswith("pbkdf2_sha256$1000$")


def test_unknown_backends_are_rejected():
    with pytest.raises(ValueError):
        build_key_value_store(Settings(_env_file=None, storage_backend="browser"))
    with pytest.raises(ValueError):
        build_credential_hasher(Settings(_env_file=None, credential_scheme="md5"))
