"""
Adapter: Session tokens as signed JWTs.

Implements TokenPort with PyJWT (HS256).
"""

import logging
from datetime import UTC, datetime, timedelta

import jwt

from app.domain.qa.entities import Session
from app.domain.qa.errors import CannotDecryptToken
from app.domain.qa.ports import TokenPort

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class JwtTokenService(TokenPort):
    """Issues and verifies session tokens.

    Args:
        secret: HMAC signing key.
        ttl: Lifetime of an issued token.
    """

    def __init__(self, secret: str, ttl: timedelta = timedelta(days=1)) -> None:
        self._secret = secret
        self._ttl = ttl

    def issue(self, account_id: int) -> str:
        now = datetime.now(UTC)
        payload = {
            "account_id": account_id,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Session:
        """Decode and validate a token.

        Raises:
            CannotDecryptToken: If the signature, expiry or claims are invalid.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "account_id"]},
            )
        except jwt.InvalidTokenError as exc:
            logger.debug("Rejected session token: %r", exc)
            raise CannotDecryptToken() from exc
        return Session(account_id=int(payload["account_id"]), expires_at=payload["exp"])
