"""
Domain models - Accounts and the messages exchanged during registration.

Plain dataclasses; persistence and transport shapes live in the adapters
and the API layer.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class RegistrationRequest:
    """
    Registration input. Exists only for the duration of one call.

    Fields are unchecked until validate_registration() accepts them.
    """

    email: str | None
    password: str | None
    confirm_password: str | None
    full_name: str | None
    phone_number: str | None
    address: str | None = None


@dataclass
class Account:
    """Locally stored credentials for one user."""

    id: UUID
    email: str
    password_hash: str
    full_name: str | None
    created_at: datetime


@dataclass(frozen=True)
class ProfileRequest:
    """Payload sent to the remote profile service."""

    user_id: UUID
    first_name: str
    last_name: str
    phone_number: str
    address: str | None

    @classmethod
    def for_account(cls, account: Account, request: RegistrationRequest) -> "ProfileRequest":
        """
        Build the profile payload for a freshly created account.

        The first whitespace-separated token of the full name becomes the
        first name; the rest, joined by single spaces, the last name.
        """
        names = request.full_name.split()
        first_name = names[0] if names else ""
        last_name = " ".join(names[1:])
        return cls(
            user_id=account.id,
            first_name=first_name,
            last_name=last_name,
            phone_number=request.phone_number,
            address=request.address,
        )

    def to_json(self) -> dict:
        return {
            "userId": str(self.user_id),
            "firstName": self.first_name,
            "lastName": self.last_name,
            "phoneNumber": self.phone_number,
            "address": self.address,
        }


@dataclass(frozen=True)
class ProfileCreated:
    """Remote service acknowledged the profile."""

    status_code: int = 201


@dataclass(frozen=True)
class ProfileRejected:
    """Remote service answered with a non-success status."""

    status_code: int
    error: str | None = None


ProfileResult = ProfileCreated | ProfileRejected
