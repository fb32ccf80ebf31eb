"""Pydantic DTOs (Data Transfer Objects) for account operations."""

from pydantic import BaseModel, ConfigDict, Field


class RegistrationRequest(BaseModel):
    """Schema for registering a new customer.

    Required fields may be left out or ``None`` so that the directory can
    report every missing field at once instead of failing on the first.
    """

    email: str | None = Field(None, examples=["jane@example.com"])
    password: str | None = None
    first_name: str | None = Field(None, examples=["Jane"])
    last_name: str | None = Field(None, examples=["Doe"])
    phone: str | None = None
    address: str | None = None


class ProfileUpdate(BaseModel):
    """Schema for a profile update. Only mutable fields, all optional."""

    model_config = ConfigDict(extra="forbid")

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    address: str | None = None


class OperationResult(BaseModel):
    """Outcome of a successful account operation, for display."""

    success: bool = True
    message: str
