"""Application service for customer accounts and the login session."""

import logging

from fruit_shop.application.interfaces import (
    CredentialHasher,
    SessionRepository,
    SessionView,
    UserRepository,
)
from fruit_shop.application.schemas import OperationResult, ProfileUpdate, RegistrationRequest
from fruit_shop.application.services.identifiers import Clock, StampIdGenerator, utc_now
from fruit_shop.domain.entities import SessionUser, UserRecord
from fruit_shop.domain.exceptions import (
    CorruptRecordError,
    DuplicateUserError,
    InvalidCredentialError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("email", "password", "first_name", "last_name")


def _normalise_email(email: str) -> str:
    return email.strip().lower()


def _is_blank(value: str | None) -> bool:
    return not (value or "").strip()


class AccountDirectory(SessionView):
    """Owns the user directory and the authenticated session.

    Every mutation reads the whole directory, changes it in memory and
    writes it back. The session is rehydrated from its persisted snapshot
    when the directory is constructed.
    """

    def __init__(
        self,
        users: UserRepository,
        sessions: SessionRepository,
        hasher: CredentialHasher,
        clock: Clock = utc_now,
        ids: StampIdGenerator | None = None,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._hasher = hasher
        self._clock = clock
        self._ids = ids or StampIdGenerator(clock)
        self._session = self._rehydrate_session()

    def _rehydrate_session(self) -> SessionUser | None:
        try:
            return self._sessions.load()
        except CorruptRecordError as exc:
            logger.warning("Discarding unreadable session snapshot: %s", exc)
            self._sessions.clear()
            return None

    # ── Session view ────────────────────────────────────────────────

    def is_authenticated(self) -> bool:
        return self._session is not None

    def current_user(self) -> SessionUser | None:
        return self._session

    # ── Directory queries ───────────────────────────────────────────

    def list_users(self) -> list[UserRecord]:
        return self._users.load_all()

    def find_by_email(self, email: str) -> UserRecord | None:
        wanted = _normalise_email(email)
        for user in self._users.load_all():
            if user.email == wanted:
                return user
        return None

    def get_user(self, user_id: str) -> UserRecord:
        for user in self._users.load_all():
            if user.id == user_id:
                return user
        raise NotFoundError("User", user_id)

    # ── Identity operations ─────────────────────────────────────────

    def register(self, data: RegistrationRequest) -> OperationResult:
        missing = [name for name in _REQUIRED_FIELDS if _is_blank(getattr(data, name))]
        if missing:
            raise ValidationError(missing)

        email = _normalise_email(data.email)
        users = self._users.load_all()
        if any(user.email == email for user in users):
            raise DuplicateUserError(email)

        user = UserRecord(
            id=self._ids.next_id(),
            email=email,
            credential_hash=self._hasher.hash(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone or "",
            address=data.address or "",
            created_at=self._clock(),
        )
        users.append(user)
        self._users.save_all(users)

        logger.info("Registered user %s (%s)", user.id, email)
        return OperationResult(message="Account created successfully!")

    def login(self, email: str, password: str) -> OperationResult:
        user = self.find_by_email(email)
        if user is None:
            raise NotFoundError("User", _normalise_email(email))
        if not self._hasher.verify(password, user.credential_hash):
            raise InvalidCredentialError(user.email)

        self._session = user.to_session()
        self._sessions.save(self._session)

        logger.info("User %s logged in", user.id)
        return OperationResult(message="Login successful!")

    def logout(self) -> None:
        if self._session is not None:
            logger.info("User %s logged out", self._session.id)
        self._session = None
        self._sessions.clear()

    def update_profile(self, patch: ProfileUpdate) -> OperationResult:
        if self._session is None:
            raise UnauthenticatedError("update your profile")

        users = self._users.load_all()
        user = next((u for u in users if u.id == self._session.id), None)
        if user is None:
            raise NotFoundError("User", self._session.id)

        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        if "email" in changes:
            if _is_blank(changes["email"]):
                raise ValidationError(["email"])
            email = _normalise_email(changes["email"])
            if any(u.email == email and u.id != user.id for u in users):
                raise DuplicateUserError(email)
            changes["email"] = email

        user.update(**changes)
        self._users.save_all(users)

        self._session = user.to_session()
        self._sessions.save(self._session)

        logger.info("Updated profile of user %s", user.id)
        return OperationResult(message="Profile updated successfully!")

    def attach_order(self, user_id: str, order_id: str) -> None:
        """Append ``order_id`` to the user's order history.

        The session snapshot is left as it was at login.
        """
        users = self._users.load_all()
        user = next((u for u in users if u.id == user_id), None)
        if user is None:
            raise NotFoundError("User", user_id)
        user.append_order(order_id)
        self._users.save_all(users)
