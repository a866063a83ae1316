"""HTTP adapters - Clients for remote services."""

from .profile_service import HttpProfileDirectory

__all__ = ["HttpProfileDirectory"]
