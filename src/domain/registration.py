"""
Registration orchestrator - One logical write across two services.

Creates an account in the local store and a matching profile in the
remote profile service. There is no shared transaction; a failure after
the local write is undone by a compensating delete (ProfileProvisioner).

Stages (forward-only, no retries)
=================================

    START -> VALIDATED -> EMAIL_CHECKED -> PHONE_CHECKED
          -> LOCAL_CREATED -> REMOTE_PROVISIONED

Failure exits:
    START          -> ValidationFailed       (nothing contacted)
    VALIDATED      -> EmailConflict          (local read only)
    EMAIL_CHECKED  -> PhoneConflict / UpstreamUnavailable (no local write)
    PHONE_CHECKED  -> EmailConflict / InternalError (insert failed, no remote call)
    LOCAL_CREATED  -> COMPENSATED -> PhoneConflict / UpstreamUnavailable / InternalError

A transient remote failure requires the caller to resubmit the whole
request.
"""

import logging
from dataclasses import dataclass, field

from .accounts import AccountRegistrar
from .exceptions import EmailAlreadyRegistered
from .models import RegistrationRequest
from .outcomes import (
    Created,
    EmailConflict,
    InternalError,
    RegistrationOutcome,
    RegistrationStage,
    ValidationFailed,
)
from .ports import AccountRepository, PasswordHasher, ProfileDirectory
from .provisioning import ProfileProvisioner
from .uniqueness import UniquenessChecker
from .validation import validate_registration


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Sequences validation, uniqueness checks, local account creation and
    remote profile provisioning. Holds no state between calls; every
    collaborator failure is mapped to exactly one RegistrationOutcome.
    """

    repository: AccountRepository
    hasher: PasswordHasher
    profiles: ProfileDirectory
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def __post_init__(self) -> None:
        self.uniqueness = UniquenessChecker(self.repository, self.profiles, self.logger)
        self.registrar = AccountRegistrar(self.repository, self.hasher, self.logger)
        self.provisioner = ProfileProvisioner(self.profiles, self.repository, self.logger)

    def register(self, request: RegistrationRequest) -> RegistrationOutcome:
        """
        Register a new user across the local store and the profile service.

        Args:
            request: Registration input as received from the caller

        Returns:
            Created on success, otherwise the classified failure
        """
        stage = RegistrationStage.START
        self.logger.info("Registering new user with email: %s", request.email)

        reason = validate_registration(request)
        if reason is not None:
            return self._fail(stage, ValidationFailed(reason))
        stage = self._advance(stage, RegistrationStage.VALIDATED)

        outcome = self.uniqueness.check_email(request.email)
        if outcome is not None:
            return self._fail(stage, outcome)
        stage = self._advance(stage, RegistrationStage.EMAIL_CHECKED)

        outcome = self.uniqueness.check_phone(request.phone_number)
        if outcome is not None:
            return self._fail(stage, outcome)
        stage = self._advance(stage, RegistrationStage.PHONE_CHECKED)

        try:
            account = self.registrar.create(request)
        except EmailAlreadyRegistered:
            self.logger.info("Email claimed concurrently, insert rejected: %s", request.email)
            return self._fail(stage, EmailConflict())
        except Exception as e:
            self.logger.error("Failed to register user with email: %s", request.email, exc_info=True)
            return self._fail(stage, InternalError(cause=e))
        stage = self._advance(stage, RegistrationStage.LOCAL_CREATED)

        outcome = self.provisioner.provision(account, request)
        if not isinstance(outcome, Created):
            return self._fail(RegistrationStage.COMPENSATED, outcome)
        self._advance(stage, RegistrationStage.REMOTE_PROVISIONED)

        self.logger.info(
            "User registered successfully with ID: %s, Email: %s", account.id, account.email
        )
        return outcome

    def _advance(self, current: RegistrationStage, target: RegistrationStage) -> RegistrationStage:
        self.logger.debug("Registration stage %s -> %s", current.value, target.value)
        return target

    def _fail(self, stage: RegistrationStage, outcome: RegistrationOutcome) -> RegistrationOutcome:
        self.logger.info(
            "Registration ended at %s with %s", stage.value, type(outcome).__name__
        )
        return outcome
