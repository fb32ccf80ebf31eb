from .account import OperationResult, ProfileUpdate, RegistrationRequest

__all__ = [
    "OperationResult",
    "ProfileUpdate",
    "RegistrationRequest",
]
