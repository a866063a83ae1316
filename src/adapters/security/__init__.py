"""Security adapters - Password hashing and access tokens."""

from .bcrypt_hasher import BcryptPasswordHasher
from .jwt_tokens import JwtTokenIssuer

__all__ = ["BcryptPasswordHasher", "JwtTokenIssuer"]
