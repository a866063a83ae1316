"""
Domain exceptions - Semantic error types for the auth service.

Adapters translate infrastructure failures (database, HTTP, JWT) into
these types so the domain never depends on library exceptions.
"""


class AuthServiceError(Exception):
    """Base class for auth service domain errors."""

    pass


class EmailAlreadyRegistered(AuthServiceError):
    """The local store rejected an insert on its unique email index."""

    pass


class ProfileServiceError(AuthServiceError):
    """
    The remote profile service could not be used.

    Covers transport failures (timeout, refused connection), unexpected
    status codes and response bodies that cannot be parsed.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidToken(AuthServiceError):
    """Access token is malformed, expired or carries a bad signature."""

    pass
