"""
Profile provisioner - Creates the remote profile and compensates on failure.

Two-step commit with a single compensating action
================================================

1. The local account already exists (AccountRegistrar).
2. The remote profile is requested.

If step 2 does not succeed, for any reason, the local account is deleted
before the failure is classified. Compensation is best-effort: a failed
delete is logged at CRITICAL as an orphaned account and does not change
the outcome returned to the caller, which is always decided by the
original remote failure.

Cancellation (KeyboardInterrupt, SystemExit, task cancellation) arriving
during the remote call also triggers compensation before it propagates.
"""

import logging
from dataclasses import dataclass, field

from .models import Account, ProfileCreated, ProfileRequest, ProfileResult, RegistrationRequest
from .outcomes import (
    DEFAULT_PHONE_CONFLICT_MESSAGE,
    Created,
    InternalError,
    PhoneConflict,
    RegistrationOutcome,
    UpstreamUnavailable,
)
from .ports import AccountRepository, ProfileDirectory

CONFLICT = 409


@dataclass
class ProfileProvisioner:
    """Provisions the remote profile for a newly created local account."""

    profiles: ProfileDirectory
    repository: AccountRepository
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def provision(self, account: Account, request: RegistrationRequest) -> RegistrationOutcome:
        """
        Create the remote profile tied to account.id.

        Returns:
            Created(account) on success; otherwise the classified failure,
            after the local account has been compensated
        """
        profile = ProfileRequest.for_account(account, request)

        try:
            result = self.profiles.create_profile(profile)
        except Exception as e:
            self.compensate(account)
            self.logger.error(
                "Profile creation failed. Auth user rolled back for %s",
                account.email,
                exc_info=True,
            )
            return InternalError(cause=e)
        except BaseException:
            self.logger.warning(
                "Registration interrupted during profile creation for %s", account.email
            )
            self.compensate(account)
            raise

        if isinstance(result, ProfileCreated):
            self.logger.info("Profile provisioned for account %s", account.id)
            return Created(account)

        self.compensate(account)
        self.logger.error(
            "Profile creation failed with status %s: %s. Auth user rolled back.",
            result.status_code,
            result.error,
        )
        return self.classify(result)

    def classify(self, result: ProfileResult) -> RegistrationOutcome:
        """Map a rejected profile creation to the caller-visible outcome."""
        if result.status_code == CONFLICT:
            if result.error is None:
                return PhoneConflict(DEFAULT_PHONE_CONFLICT_MESSAGE)
            return PhoneConflict(result.error)
        return UpstreamUnavailable(status_code=result.status_code)

    def compensate(self, account: Account) -> bool:
        """
        Delete the local account created for this registration.

        Never raises. Returns True if the account is gone afterwards
        (deleted now or already absent).
        """
        try:
            deleted = self.repository.delete(account.id)
        except Exception:
            self.logger.critical(
                "Compensation failed: account %s (%s) is orphaned without a remote "
                "profile and needs manual reconciliation",
                account.id,
                account.email,
                exc_info=True,
            )
            return False

        if deleted:
            self.logger.info("Compensated: deleted account %s", account.id)
        else:
            self.logger.warning("Compensation found no account %s to delete", account.id)
        return True
