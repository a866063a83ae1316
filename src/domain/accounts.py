"""
Account registrar - Creates the local account record.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .models import Account, RegistrationRequest
from .ports import AccountRepository, PasswordHasher


@dataclass
class AccountRegistrar:
    """Hashes the password and persists a new Account."""

    repository: AccountRepository
    hasher: PasswordHasher
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def create(self, request: RegistrationRequest) -> Account:
        """
        Create and persist the account for a validated request.

        Raises:
            EmailAlreadyRegistered: If the store's unique index rejects the email
            Exception: Any hashing or persistence failure, unchanged
        """
        account = Account(
            id=uuid.uuid4(),
            email=request.email,
            password_hash=self.hasher.hash(request.password),
            full_name=request.full_name,
            created_at=datetime.now(timezone.utc),
        )
        self.repository.insert(account)
        self.logger.info("Account created: %s, Email: %s", account.id, account.email)
        return account
