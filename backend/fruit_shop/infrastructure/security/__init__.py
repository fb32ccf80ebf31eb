from .credential_hashers import LegacyCredentialHasher, Pbkdf2CredentialHasher

__all__ = [
    "LegacyCredentialHasher",
    "Pbkdf2CredentialHasher",
]
