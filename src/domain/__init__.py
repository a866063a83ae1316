"""
Domain layer - Pure business logic with zero framework imports.

This package contains the registration orchestrator and the
authentication service. It defines its own port interfaces for
infrastructure abstraction, ensuring true hexagonal architecture
decoupling.
"""

from .auth import AuthService
from .exceptions import (
    AuthServiceError,
    EmailAlreadyRegistered,
    InvalidToken,
    ProfileServiceError,
)
from .models import (
    Account,
    ProfileCreated,
    ProfileRejected,
    ProfileRequest,
    RegistrationRequest,
)
from .outcomes import (
    Created,
    EmailConflict,
    InternalError,
    PhoneConflict,
    RegistrationOutcome,
    RegistrationStage,
    UpstreamUnavailable,
    ValidationFailed,
)
from .ports import AccountRepository, PasswordHasher, ProfileDirectory, TokenIssuer
from .registration import RegistrationService

__all__ = [
    "Account",
    "AccountRepository",
    "AuthService",
    "AuthServiceError",
    "Created",
    "EmailAlreadyRegistered",
    "EmailConflict",
    "InternalError",
    "InvalidToken",
    "PasswordHasher",
    "PhoneConflict",
    "ProfileCreated",
    "ProfileDirectory",
    "ProfileRejected",
    "ProfileRequest",
    "ProfileServiceError",
    "RegistrationOutcome",
    "RegistrationRequest",
    "RegistrationService",
    "RegistrationStage",
    "TokenIssuer",
    "UpstreamUnavailable",
    "ValidationFailed",
]
