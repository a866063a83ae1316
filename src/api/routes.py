"""
API routes - Authentication endpoints.

This module defines the HTTP endpoints:
- POST /api/auth/register - Register locally and provision the remote profile
- POST /api/auth/login - Exchange credentials for an access token
- POST /api/auth/reset-password - Replace a password
- GET  /api/auth/me - Profile of the authenticated account

Routes are plain functions: the services block on bcrypt, Postgres and
the profile service, so FastAPI runs them in its threadpool.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import (
    get_auth_service,
    get_current_account_id,
    get_registration_service,
    get_token_issuer,
)
from src.api.models import (
    AccountResponse,
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    ResetPasswordRequest,
    StatusResponse,
)
from src.domain.auth import AuthService
from src.domain.outcomes import (
    Created,
    EmailConflict,
    InternalError,
    PhoneConflict,
    RegistrationOutcome,
    UpstreamUnavailable,
    ValidationFailed,
)
from src.domain.ports import TokenIssuer
from src.domain.registration import RegistrationService
from src.domain.validation import is_blank

router = APIRouter(tags=["auth"])


def outcome_error(outcome: RegistrationOutcome) -> HTTPException:
    """Map a failed registration outcome to its HTTP error."""
    if isinstance(outcome, ValidationFailed):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=outcome.reason)
    if isinstance(outcome, (EmailConflict, PhoneConflict)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=outcome.message)
    if isinstance(outcome, UpstreamUnavailable):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=outcome.message)
    if isinstance(outcome, InternalError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=outcome.message
        )
    raise TypeError(f"Not a failure outcome: {outcome!r}")


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid registration data"},
        409: {"model": ErrorResponse, "description": "Email or phone number already registered"},
        500: {"model": ErrorResponse, "description": "Registration failed"},
        503: {"model": ErrorResponse, "description": "Profile service unavailable"},
    },
    summary="Register a new user",
    description="Create the local account and the matching profile in the user service. "
    "If the profile cannot be created the local account is rolled back.",
)
def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse:
    outcome = service.register(request_data.to_domain())
    if not isinstance(outcome, Created):
        raise outcome_error(outcome)

    account = outcome.account
    return RegisterResponse(id=account.id, email=account.email, full_name=account.full_name)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing credentials"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
    summary="Log in",
)
def login(
    request_data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthResponse:
    if is_blank(request_data.email) or is_blank(request_data.password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Email and password required"
        )

    account = service.login(request_data.email, request_data.password)
    if account is None:
        # Same answer for unknown email and wrong password
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    return AuthResponse(
        token=issuer.issue(account),
        expires_in=issuer.expires_in,
        user_id=account.id,
        email=account.email,
    )


@router.post(
    "/reset-password",
    response_model=StatusResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing email or password"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
    summary="Reset a password",
)
def reset_password(
    request_data: ResetPasswordRequest,
    service: AuthService = Depends(get_auth_service),
) -> StatusResponse:
    if is_blank(request_data.email) or is_blank(request_data.new_password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Email and new password required"
        )

    if not service.reset_password(request_data.email, request_data.new_password):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return StatusResponse(status="password reset")


@router.get(
    "/me",
    response_model=AccountResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
    summary="Get the authenticated account",
)
def me(
    account_id: UUID = Depends(get_current_account_id),
    service: AuthService = Depends(get_auth_service),
) -> AccountResponse:
    account = service.get_account(account_id)
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return AccountResponse(
        id=account.id,
        email=account.email,
        full_name=account.full_name,
        created_at=account.created_at,
    )
