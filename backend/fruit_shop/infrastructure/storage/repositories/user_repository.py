"""Concrete user and session repositories backed by a KeyValueStore."""

import logging

from fruit_shop.application.interfaces import KeyValueStore, SessionRepository, UserRepository
from fruit_shop.domain.entities import SessionUser, UserRecord
from fruit_shop.infrastructure.storage.models import (
    SESSION_KEY,
    USERS_KEY,
    SessionUserModel,
    UserRecordModel,
    decode_partition,
    session_adapter,
    user_list_adapter,
)

logger = logging.getLogger(__name__)


class KeyValueUserRepository(UserRepository):
    """Implements the UserRepository port as one JSON array under ``users``."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _to_entity(self, model: UserRecordModel) -> UserRecord:
        """Map storage model → domain entity."""
        return UserRecord(
            id=model.id,
            email=model.email,
            credential_hash=model.credential_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            phone=model.phone,
            address=model.address,
            created_at=model.created_at,
            order_ids=list(model.order_ids),
        )

    def _to_model(self, entity: UserRecord) -> UserRecordModel:
        """Map domain entity → storage model."""
        return UserRecordModel(
            id=entity.id,
            email=entity.email,
            credential_hash=entity.credential_hash,
            first_name=entity.first_name,
            last_name=entity.last_name,
            phone=entity.phone,
            address=entity.address,
            created_at=entity.created_at,
            order_ids=list(entity.order_ids),
        )

    def load_all(self) -> list[UserRecord]:
        raw = self._store.get(USERS_KEY)
        if raw is None:
            return []
        models = decode_partition(user_list_adapter, raw, USERS_KEY)
        return [self._to_entity(m) for m in models]

    def save_all(self, users: list[UserRecord]) -> None:
        payload = user_list_adapter.dump_json(
            [self._to_model(u) for u in users], by_alias=True
        )
        self._store.set(USERS_KEY, payload.decode("utf-8"))
        logger.debug("Saved %d user(s)", len(users))


class KeyValueSessionRepository(SessionRepository):
    """Implements the SessionRepository port under ``currentUser``."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def load(self) -> SessionUser | None:
        raw = self._store.get(SESSION_KEY)
        if raw is None:
            return None
        model = decode_partition(session_adapter, raw, SESSION_KEY)
        return SessionUser(**model.model_dump())

    def save(self, user: SessionUser) -> None:
        model = SessionUserModel(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            address=user.address,
            created_at=user.created_at,
            order_ids=list(user.order_ids),
        )
        self._store.set(SESSION_KEY, model.model_dump_json(by_alias=True))

    def clear(self) -> None:
        self._store.remove(SESSION_KEY)
