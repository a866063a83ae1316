"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
JSON field names are camelCase; Python attributes are snake_case.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.models import RegistrationRequest


class CamelModel(BaseModel):
    """Base model serializing to and accepting camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(CamelModel):
    """
    Request model for user registration.

    Fields are optional and nullable so that missing or null values reach
    the domain validator and are reported with its rule-specific message.
    """

    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None
    full_name: str | None = None
    phone_number: str | None = None
    address: str | None = None

    def to_domain(self) -> RegistrationRequest:
        return RegistrationRequest(
            email=self.email,
            password=self.password,
            confirm_password=self.confirm_password,
            full_name=self.full_name,
            phone_number=self.phone_number,
            address=self.address,
        )


class RegisterResponse(CamelModel):
    """Response model for successful registration."""

    id: UUID
    email: str
    full_name: str | None


class LoginRequest(CamelModel):
    email: str | None = None
    password: str | None = None


class AuthResponse(CamelModel):
    """Response model for successful login."""

    token: str
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user_id: UUID
    email: str


class ResetPasswordRequest(CamelModel):
    email: str | None = None
    new_password: str | None = None


class StatusResponse(BaseModel):
    status: str


class AccountResponse(CamelModel):
    """Response model for the authenticated account."""

    id: UUID
    email: str
    full_name: str | None
    created_at: datetime


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
