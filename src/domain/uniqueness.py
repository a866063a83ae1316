"""
Uniqueness checks run before any local write.

Email is checked against the local store, phone number against the
remote profile service. Neither check holds a lock; the store's unique
email index is the authoritative guard (see AccountRegistrar).
"""

import logging
from dataclasses import dataclass, field

from .exceptions import ProfileServiceError
from .outcomes import (
    EmailConflict,
    InternalError,
    PhoneConflict,
    RegistrationOutcome,
    UpstreamUnavailable,
)
from .ports import AccountRepository, ProfileDirectory


@dataclass
class UniquenessChecker:
    """Confirms email is unused locally and phone number unused remotely."""

    repository: AccountRepository
    profiles: ProfileDirectory
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def check_email(self, email: str) -> RegistrationOutcome | None:
        """Return EmailConflict if the email is taken, None if free."""
        try:
            exists = self.repository.exists_by_email(email)
        except Exception as e:
            self.logger.error("Email lookup failed for %s", email, exc_info=True)
            return InternalError(cause=e)

        if exists:
            self.logger.info("Registration rejected: email already registered: %s", email)
            return EmailConflict()
        return None

    def check_phone(self, phone_number: str) -> RegistrationOutcome | None:
        """
        Ask the profile service whether the phone number is taken.

        Any failure to get an answer aborts the registration as
        UpstreamUnavailable; it is never treated as "not taken".
        """
        try:
            exists = self.profiles.phone_exists(phone_number)
        except ProfileServiceError as e:
            self.logger.error(
                "Phone check failed (status=%s). Registration aborted: %s",
                e.status_code,
                e,
            )
            return UpstreamUnavailable(status_code=e.status_code)
        except Exception:
            self.logger.error("Phone check failed. Registration aborted.", exc_info=True)
            return UpstreamUnavailable()

        if exists:
            self.logger.info("Registration rejected: phone number already registered")
            return PhoneConflict()
        return None
