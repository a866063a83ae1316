"""
Unit tests for domain ports, outcomes and exceptions.

Tests verify:
- Port interfaces are properly defined
- Outcome variants and registration stages
- Exceptions are properly structured
- Domain purity (zero framework imports)
"""

import json
import subprocess
from enum import Enum
from pathlib import Path

import pytest

from src.domain.exceptions import (
    AuthServiceError,
    EmailAlreadyRegistered,
    InvalidToken,
    ProfileServiceError,
)
from src.domain.outcomes import (
    EmailConflict,
    InternalError,
    PhoneConflict,
    RegistrationStage,
    UpstreamUnavailable,
)
from src.domain.ports import AccountRepository, PasswordHasher, ProfileDirectory, TokenIssuer

DOMAIN_DIR = Path(__file__).resolve().parents[2] / "src" / "domain"


class TestRegistrationStageEnum:
    def test_is_str_enum(self) -> None:
        assert issubclass(RegistrationStage, Enum)
        assert issubclass(RegistrationStage, str)

    def test_forward_order(self) -> None:
        assert [stage.value for stage in RegistrationStage] == [
            "START",
            "VALIDATED",
            "EMAIL_CHECKED",
            "PHONE_CHECKED",
            "LOCAL_CREATED",
            "REMOTE_PROVISIONED",
            "COMPENSATED",
        ]

    def test_json_serializable(self) -> None:
        assert json.dumps(RegistrationStage.LOCAL_CREATED) == '"LOCAL_CREATED"'


class TestOutcomeDefaults:
    def test_phone_conflict_default_message(self) -> None:
        assert PhoneConflict().message == "Phone number already registered"

    def test_email_conflict_message(self) -> None:
        assert EmailConflict().message == "Email already registered"

    def test_upstream_unavailable_without_status(self) -> None:
        assert UpstreamUnavailable().status_code is None

    def test_internal_error_keeps_cause(self) -> None:
        cause = RuntimeError("boom")
        assert InternalError(cause).cause is cause


class TestPortProtocols:
    @pytest.mark.parametrize(
        ("port", "methods"),
        [
            (PasswordHasher, ["hash", "verify"]),
            (
                AccountRepository,
                [
                    "insert",
                    "find_by_email",
                    "find_by_id",
                    "exists_by_email",
                    "delete",
                    "update_password_hash",
                ],
            ),
            (ProfileDirectory, ["phone_exists", "create_profile"]),
            (TokenIssuer, ["issue", "decode"]),
        ],
    )
    def test_port_defines_methods(self, port, methods) -> None:
        for method in methods:
            assert hasattr(port, method), f"{port.__name__}.{method} missing"


class TestDomainExceptions:
    @pytest.mark.parametrize("exc", [EmailAlreadyRegistered, ProfileServiceError, InvalidToken])
    def test_inherits_auth_service_error(self, exc) -> None:
        assert issubclass(exc, AuthServiceError)

    def test_profile_service_error_carries_status(self) -> None:
        error = ProfileServiceError("bad gateway", status_code=502)
        assert error.status_code == 502
        assert str(error) == "bad gateway"

    def test_profile_service_error_status_optional(self) -> None:
        assert ProfileServiceError("timeout").status_code is None


class TestDomainPurity:
    """Domain layer has zero framework and driver imports."""

    @pytest.mark.parametrize(
        "pattern",
        [
            "fastapi",
            "pydantic",
            "psycopg",
            "httpx",
            "jwt",
            "bcrypt",
        ],
    )
    def test_no_infrastructure_imports(self, pattern: str) -> None:
        result = subprocess.run(
            ["grep", "-rE", f"^(from|import) {pattern}", str(DOMAIN_DIR)],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"{pattern} import found: {result.stdout}"
