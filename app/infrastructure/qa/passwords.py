"""
Adapter: Argon2 password hashing.

Implements PasswordHasherPort with argon2-cffi.
A mismatch is a normal outcome (False); any other library failure
is raised as CredentialHashingError.
"""

from argon2 import PasswordHasher
from argon2.exceptions import Argon2Error, InvalidHashError, VerifyMismatchError

from app.domain.qa.errors import CredentialHashingError
from app.domain.qa.ports import PasswordHasherPort


class Argon2PasswordHasher(PasswordHasherPort):
    """Hashes and verifies passwords with Argon2id."""

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        self._hasher = hasher or PasswordHasher()

    def hash(self, password: str) -> str:
        try:
            return self._hasher.hash(password)
        except Argon2Error as exc:
            raise CredentialHashingError(exc) from exc

    def verify(self, encoded_hash: str, password: str) -> bool:
        try:
            return self._hasher.verify(encoded_hash, password)
        except VerifyMismatchError:
            return False
        except (Argon2Error, InvalidHashError) as exc:
            raise CredentialHashingError(exc) from exc
