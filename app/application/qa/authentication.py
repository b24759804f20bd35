"""
Use cases: registration, login and session verification.

Failure cases: DatabaseQueryError (duplicate e-mail included),
WrongPassword, CredentialHashingError, CannotDecryptToken.
"""

import logging

from app.domain.qa.entities import Account, Session
from app.domain.qa.errors import WrongPassword
from app.domain.qa.ports import AccountRepository, PasswordHasherPort, TokenPort

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """Hashes the password and stores a new account."""

    def __init__(
        self, account_repo: AccountRepository, hasher: PasswordHasherPort
    ) -> None:
        self._account_repo = account_repo
        self._hasher = hasher

    def execute(self, account: Account) -> bool:
        hashed = Account(email=account.email, password=self._hasher.hash(account.password))
        return self._account_repo.add_account(hashed)


class LoginUseCase:
    """Checks credentials and issues a session token."""

    def __init__(
        self,
        account_repo: AccountRepository,
        hasher: PasswordHasherPort,
        tokens: TokenPort,
    ) -> None:
        self._account_repo = account_repo
        self._hasher = hasher
        self._tokens = tokens

    def execute(self, credentials: Account) -> str:
        """Return a session token for valid credentials.

        Raises:
            WrongPassword: If the e-mail is unknown or the password does not match.
        """
        stored = self._account_repo.get_account(credentials.email)
        if not self._hasher.verify(stored.password, credentials.password):
            raise WrongPassword()
        logger.info("Account %d logged in", stored.id)
        return self._tokens.issue(stored.id)


class VerifySessionUseCase:
    """Decodes the session token sent by a caller."""

    def __init__(self, tokens: TokenPort) -> None:
        self._tokens = tokens

    def execute(self, token: str) -> Session:
        return self._tokens.verify(token)
