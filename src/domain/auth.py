"""
Authentication domain service - Login, password reset and account lookup.
"""

import logging
from dataclasses import dataclass, field
from uuid import UUID

from .models import Account
from .ports import AccountRepository, PasswordHasher


@dataclass
class AuthService:
    """Credential checks against the local account store."""

    repository: AccountRepository
    hasher: PasswordHasher
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def login(self, email: str, password: str) -> Account | None:
        """
        Check credentials.

        Returns:
            The account on success, None for an unknown email or a wrong
            password (callers must not tell the two apart)
        """
        self.logger.info("Login attempt for email: %s", email)
        account = self.repository.find_by_email(email)
        if account is None:
            self.logger.warning("Login failed: User not found for email: %s", email)
            return None

        if not self.hasher.verify(password, account.password_hash):
            self.logger.warning("Login failed: Invalid password for email: %s", email)
            return None

        self.logger.info("User logged in successfully: %s, Email: %s", account.id, account.email)
        return account

    def reset_password(self, email: str, new_password: str) -> bool:
        """Replace the password of the account with this email. False if unknown."""
        self.logger.info("Password reset attempt for email: %s", email)
        account = self.repository.find_by_email(email)
        if account is None:
            self.logger.warning("Password reset failed: User not found for email: %s", email)
            return False

        password_hash = self.hasher.hash(new_password)
        if not self.repository.update_password_hash(account.id, password_hash):
            self.logger.warning("Password reset failed: account %s vanished", account.id)
            return False

        self.logger.info("Password reset successful for user: %s, Email: %s", account.id, email)
        return True

    def get_account(self, account_id: UUID) -> Account | None:
        account = self.repository.find_by_id(account_id)
        if account is None:
            self.logger.warning("User not found with ID: %s", account_id)
        return account
