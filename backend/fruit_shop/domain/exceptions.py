"""Domain-specific exceptions — framework-independent."""


class ValidationError(Exception):
    """Raised when required input is missing."""

    def __init__(self, missing_fields: list[str], message: str | None = None):
        self.missing_fields = list(missing_fields)
        if message is None:
            message = "Please fill in all required fields: " + ", ".join(self.missing_fields)
        super().__init__(message)


class DuplicateUserError(Exception):
    """Raised when registering an email that already belongs to a user."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User with email '{email}' already exists")


class NotFoundError(Exception):
    """Raised when a requested user or order does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} '{entity_id}' not found")


class InvalidCredentialError(Exception):
    """Raised when a password does not match the stored credential."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Invalid password")


class UnauthenticatedError(Exception):
    """Raised when an operation needs a logged-in user and there is none."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Please login to {action}")


class CorruptRecordError(Exception):
    """Raised when a stored partition cannot be decoded."""

    def __init__(self, partition: str, reason: str):
        self.partition = partition
        self.reason = reason
        super().__init__(f"Stored '{partition}' data is unreadable: {reason}")
