"""Credential hashers: the storefront's legacy placeholder and a PBKDF2 replacement."""

import base64
import hashlib
import hmac
import secrets

from fruit_shop.application.interfaces import CredentialHasher

DEFAULT_SALT = "fruit_shop_salt"
_PBKDF2_PREFIX = "pbkdf2_sha256"


class LegacyCredentialHasher(CredentialHasher):
    """Base64 of password + a static application-wide salt.

    INSECURE: this is an encoding, not a hash, and is trivially reversible.
    Kept so that directories written by the original storefront still log
    in. Use ``Pbkdf2CredentialHasher`` for anything real.
    """

    def __init__(self, salt: str = DEFAULT_SALT):
        self._salt = salt

    def hash(self, password: str) -> str:
        return base64.b64encode((password + self._salt).encode("utf-8")).decode("ascii")

    def verify(self, password: str, stored_hash: str) -> bool:
        return hmac.compare_digest(self.hash(password), stored_hash)


class Pbkdf2CredentialHasher(CredentialHasher):
    """Salted PBKDF2-HMAC-SHA256.

    Stored format: ``pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>``.
    """

    def __init__(self, iterations: int = 240_000, salt_bytes: int = 16):
        self._iterations = iterations
        self._salt_bytes = salt_bytes

    def _derive(self, password: str, salt: bytes, iterations: int) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)

    def hash(self, password: str) -> str:
        salt = secrets.token_bytes(self._salt_bytes)
        digest = self._derive(password, salt, self._iterations)
        return f"{_PBKDF2_PREFIX}${self._iterations}${salt.hex()}${digest.hex()}"

    def verify(self, password: str, stored_hash: str) -> bool:
        try:
            scheme, iterations, salt_hex, digest_hex = stored_hash.split("$")
            if scheme != _PBKDF2_PREFIX:
                return False
            salt = bytes.fromhex(salt_hex)
            expected = bytes.fromhex(digest_hex)
            rounds = int(iterations)
        except ValueError:
            return False
        return hmac.compare_digest(self._derive(password, salt, rounds), expected)
