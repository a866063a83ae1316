"""
bcrypt password hasher adapter - Implements PasswordHasher protocol.
"""

import bcrypt

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _password_bytes(plaintext: str) -> bytes:
    """UTF-8 encode and cut to what bcrypt reads, for both hash and verify."""
    return plaintext.encode()[:MAX_PASSWORD_BYTES]


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Passwords longer than 72 bytes are truncated, so they hash and
    verify the same on every bcrypt release.
    """

    def __init__(self, cost: int = 10) -> None:
        self._cost = cost

    def hash(self, plaintext: str) -> str:
        return bcrypt.hashpw(_password_bytes(plaintext), bcrypt.gensalt(rounds=self._cost)).decode()

    def verify(self, plaintext: str, hashed: str) -> bool:
        """
        Compare plaintext against a stored hash in constant time.

        A hash that bcrypt cannot parse counts as a mismatch.
        """
        try:
            return bcrypt.checkpw(_password_bytes(plaintext), hashed.encode())
        except ValueError:
            return False
