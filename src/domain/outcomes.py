"""
Registration outcomes - Tagged result of one registration attempt.

Every path through RegistrationService.register() ends in exactly one of
these variants. Callers (the HTTP layer) translate them to responses
without re-deriving any orchestration logic.
"""

from dataclasses import dataclass
from enum import Enum

from .models import Account

DEFAULT_PHONE_CONFLICT_MESSAGE = "Phone number already registered"


class RegistrationStage(str, Enum):
    """
    Stages of the registration pipeline.

    Forward-only:
        START -> VALIDATED -> EMAIL_CHECKED -> PHONE_CHECKED
              -> LOCAL_CREATED -> REMOTE_PROVISIONED

    Any stage may exit to a failure outcome. Only LOCAL_CREATED exits
    through COMPENSATED, after the local account has been deleted.
    """

    START = "START"
    VALIDATED = "VALIDATED"
    EMAIL_CHECKED = "EMAIL_CHECKED"
    PHONE_CHECKED = "PHONE_CHECKED"
    LOCAL_CREATED = "LOCAL_CREATED"
    REMOTE_PROVISIONED = "REMOTE_PROVISIONED"
    COMPENSATED = "COMPENSATED"


@dataclass(frozen=True)
class Created:
    """Account persisted and remote profile provisioned."""

    account: Account


@dataclass(frozen=True)
class ValidationFailed:
    """Request failed a structural rule. Nothing was contacted."""

    reason: str


@dataclass(frozen=True)
class EmailConflict:
    """Email already belongs to a local account."""

    message: str = "Email already registered"


@dataclass(frozen=True)
class PhoneConflict:
    """Phone number already belongs to a remote profile."""

    message: str = DEFAULT_PHONE_CONFLICT_MESSAGE


@dataclass(frozen=True)
class UpstreamUnavailable:
    """
    Remote profile service unreachable or answering with an error.

    status_code is set when the remote answered with an unexpected status.
    """

    status_code: int | None = None
    message: str = "Profile service unavailable. Please try again later."


@dataclass(frozen=True)
class InternalError:
    """Unexpected failure. A local write may have occurred and been compensated."""

    cause: BaseException | None = None
    message: str = "Registration failed. Please try again later."


RegistrationOutcome = (
    Created | ValidationFailed | EmailConflict | PhoneConflict | UpstreamUnavailable | InternalError
)
