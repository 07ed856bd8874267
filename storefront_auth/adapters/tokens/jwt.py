"""
JWT token adapter - Implements TokenIssuer protocol.

Signs claims with python-jose (HS256 by default). Every token carries
``iat`` and ``exp``; expiry is enforced on verification.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from storefront_auth.domain.exceptions import InvalidToken


class JWTTokenIssuer:
    """
    Implements TokenIssuer protocol via python-jose.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        self._secret = secret
        self._algorithm = algorithm

    def issue(self, claims: dict[str, Any], ttl_seconds: int) -> str:
        """Create a signed token holding ``claims`` valid for ``ttl_seconds``."""
        now = datetime.now(timezone.utc)
        to_encode = dict(claims)
        to_encode.update(
            {
                "iat": now,
                "exp": now + timedelta(seconds=ttl_seconds),
            }
        )
        return jwt.encode(to_encode, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a token.

        Raises:
            InvalidToken: Bad signature, malformed token or expired
        """
        try:
            return jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            raise InvalidToken(str(e)) from e
