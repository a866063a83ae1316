"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from psycopg_pool import ConnectionPool

from src.adapters.http.profile_service import HttpProfileDirectory
from src.adapters.repository.postgres import PostgresAccountRepository
from src.adapters.security.bcrypt_hasher import BcryptPasswordHasher
from src.adapters.security.jwt_tokens import JwtTokenIssuer
from src.config.settings import get_settings
from src.domain.auth import AuthService
from src.domain.exceptions import InvalidToken
from src.domain.registration import RegistrationService


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresAccountRepository:
    """Create repository with connection pool from app state."""
    return PostgresAccountRepository(get_pool(request))


def get_profile_directory(request: Request) -> HttpProfileDirectory:
    """Get the shared profile service client started in the lifespan."""
    return request.app.state.profile_directory


def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(cost=get_settings().bcrypt_cost)


def get_token_issuer() -> JwtTokenIssuer:
    settings = get_settings()
    return JwtTokenIssuer(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expires_in=settings.jwt_expires_seconds,
    )


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires the account repository, password hasher and profile service
    client into the orchestrator.
    """
    return RegistrationService(
        repository=get_repository(request),
        hasher=get_password_hasher(),
        profiles=get_profile_directory(request),
    )


def get_auth_service(request: Request) -> AuthService:
    return AuthService(repository=get_repository(request), hasher=get_password_hasher())


# Bearer token security scheme for OpenAPI documentation
http_bearer = HTTPBearer(auto_error=False)


def get_current_account_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(http_bearer),
    issuer: JwtTokenIssuer = Depends(get_token_issuer),
) -> UUID:
    """
    Resolve the account id from the Bearer token.

    Missing, invalid or expired tokens and non-UUID subjects all
    return 401.
    """
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise unauthorized

    try:
        claims = issuer.decode(credentials.credentials)
        return UUID(claims["sub"])
    except (InvalidToken, KeyError, TypeError, ValueError):
        raise unauthorized from None
