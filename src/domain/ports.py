"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol
from uuid import UUID

from .models import Account, ProfileRequest, ProfileResult


class PasswordHasher(Protocol):
    """Port interface for password hashing."""

    def hash(self, plaintext: str) -> str:
        """Return an opaque hash of the plaintext password."""
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True if plaintext matches the stored hash."""
        ...


class AccountRepository(Protocol):
    """Port interface for local account persistence."""

    def insert(self, account: Account) -> None:
        """
        Persist a new account.

        Raises:
            EmailAlreadyRegistered: If the store's unique email index
                rejects the row (concurrent registration won the race)
        """
        ...

    def find_by_email(self, email: str) -> Account | None:
        """Return the account with exactly this email, or None."""
        ...

    def find_by_id(self, account_id: UUID) -> Account | None:
        """Return the account with this id, or None."""
        ...

    def exists_by_email(self, email: str) -> bool:
        """Return True if an account with exactly this email exists."""
        ...

    def delete(self, account_id: UUID) -> bool:
        """
        Delete an account by id.

        Returns:
            True if a row was removed, False if the account was not found.
            Deleting twice is not an error.
        """
        ...

    def update_password_hash(self, account_id: UUID, password_hash: str) -> bool:
        """Replace the stored hash. Returns False if the account was not found."""
        ...


class ProfileDirectory(Protocol):
    """Port interface for the remote profile service."""

    def phone_exists(self, phone_number: str) -> bool:
        """
        Ask whether a profile already uses this phone number.

        Raises:
            ProfileServiceError: On transport failure, timeout, non-200
                status or an unreadable body
        """
        ...

    def create_profile(self, request: ProfileRequest) -> ProfileResult:
        """
        Create the remote profile for a local account.

        Returns:
            ProfileCreated on any 2xx, ProfileRejected otherwise

        Raises:
            ProfileServiceError: On transport failure or timeout
        """
        ...


class TokenIssuer(Protocol):
    """Port interface for access token issuance."""

    expires_in: int

    def issue(self, account: Account) -> str:
        """Issue a signed access token for the account."""
        ...

    def decode(self, token: str) -> dict:
        """
        Validate a token and return its claims.

        Raises:
            InvalidToken: If the token is malformed, expired or forged
        """
        ...
