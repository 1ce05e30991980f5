from datetime import UTC, datetime, timedelta
from typing import Callable, Optional
from uuid import UUID

from jose import JWTError, jwt

ALGORITHM = "HS256"
DEFAULT_SESSION_TTL = timedelta(hours=8)


def _now() -> datetime:
    return datetime.now(UTC)


class SessionTokenCodec:
    """
    Issues and verifies signed session tokens (HS256 JWT).

    Payload: ``sub`` (account id), ``iat`` and ``exp`` (issuance + ttl).
    Tokens are stateless: there is no revocation list, so a token stays
    valid until ``exp`` even after the cookie carrying it is cleared.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_SESSION_TTL,
        clock: Callable[[], datetime] = _now,
    ):
        if not secret:
            raise ValueError("Session signing secret must not be empty")
        self._secret = secret
        self.ttl = ttl
        self._clock = clock

    def issue(self, account_id: UUID) -> str:
        """
        Create a signed session token for an account

        Args:
            account_id: Account UUID

        Returns:
            JWT token string
        """
        now = self._clock()
        payload = {
            "sub": str(account_id),
            "iat": int(now.timestamp()),
            "exp": int((now + self.ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Optional[UUID]:
        """
        Verify a session token

        Args:
            token: JWT token string

        Returns:
            Account UUID, or None if the token is malformed, tampered with
            or expired
        """
        try:
            # Expiry is checked below against the codec's own clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"verify_exp": False, "verify_iat": False},
            )
        except JWTError:
            return None

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)):
            return None
        if self._clock().timestamp() >= exp:
            return None

        try:
            return UUID(str(payload.get("sub")))
        except ValueError:
            return None
