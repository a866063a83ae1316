"""
JWT token issuer adapter - Implements TokenIssuer protocol via PyJWT.
"""

from datetime import datetime, timedelta, timezone

import jwt

from src.domain.exceptions import InvalidToken
from src.domain.models import Account


class JwtTokenIssuer:
    """
    Issues and validates signed access tokens.

    Claims: sub (account id), email, fullName, iat, exp.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_in: int = 21600) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, account: Account) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": str(account.id),
            "email": account.email,
            "fullName": account.full_name or "",
            "iat": now,
            "exp": now + timedelta(seconds=self.expires_in),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def decode(self, token: str) -> dict:
        """
        Validate signature and expiry, return the claims.

        Raises:
            InvalidToken: For any PyJWT validation failure
        """
        try:
            return jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.PyJWTError as e:
            raise InvalidToken(str(e)) from e
