"""
Profile service HTTP client - Implements ProfileDirectory protocol.

Client for the remote user/profile service consumed during registration:

    GET  /api/users/phone-exists/{phoneNumber}  -> 200 {"exists": bool}
    POST /api/users                             -> 201 | 409 {"error": str} | other

Connection pooling:
- Single shared httpx.Client created at app startup (FastAPI lifespan)
- Every request carries the configured timeout; nothing is retried
"""

import logging
from urllib.parse import quote

import httpx

from src.domain.exceptions import ProfileServiceError
from src.domain.models import ProfileCreated, ProfileRejected, ProfileRequest, ProfileResult

logger = logging.getLogger(__name__)


class HttpProfileDirectory:
    """
    HTTP client for profile service operations.

    Lifecycle:
        - Call start() during app startup
        - Call close() during app shutdown
    Tests may pass a ready-made httpx.Client (e.g. over httpx.MockTransport).
    """

    # Connection pool settings (per worker)
    MAX_CONNECTIONS = 100
    MAX_KEEPALIVE = 20
    KEEPALIVE_EXPIRY = 5.0

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def start(self) -> None:
        """Initialize the shared HTTP client."""
        if self._client is not None:
            logger.warning("HttpProfileDirectory already started")
            return

        limits = httpx.Limits(
            max_connections=self.MAX_CONNECTIONS,
            max_keepalive_connections=self.MAX_KEEPALIVE,
            keepalive_expiry=self.KEEPALIVE_EXPIRY,
        )
        self._client = httpx.Client(
            base_url=self.base_url,
            limits=limits,
            timeout=httpx.Timeout(self.timeout),
        )
        logger.info("HttpProfileDirectory started: base_url=%s, timeout=%ss", self.base_url, self.timeout)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("HttpProfileDirectory stopped")

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            raise ProfileServiceError("Profile service client not started")
        return self._client

    def phone_exists(self, phone_number: str) -> bool:
        """
        Ask whether a profile already uses this phone number.

        Raises:
            ProfileServiceError: On transport failure, timeout, non-200
                status or a body without a boolean "exists"
        """
        endpoint = f"/api/users/phone-exists/{quote(phone_number, safe='')}"
        try:
            response = self.client.get(endpoint, timeout=self.timeout)
        except httpx.HTTPError as e:
            logger.error("Request error checking phone number: %s", e)
            raise ProfileServiceError(f"Failed to reach profile service: {e}") from e

        if response.status_code != 200:
            logger.error(
                "Profile service returned non-success status %s when checking phone number",
                response.status_code,
            )
            raise ProfileServiceError(
                f"Profile service error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            exists = response.json()["exists"]
        except (ValueError, KeyError, TypeError) as e:
            raise ProfileServiceError(
                "Unreadable phone-exists response", status_code=response.status_code
            ) from e
        if not isinstance(exists, bool):
            raise ProfileServiceError(
                "Unreadable phone-exists response", status_code=response.status_code
            )
        return exists

    def create_profile(self, request: ProfileRequest) -> ProfileResult:
        """
        Create the remote profile.

        Returns:
            ProfileCreated on 2xx; ProfileRejected with the status and the
            body's "error" string (if any) otherwise

        Raises:
            ProfileServiceError: On transport failure or timeout
        """
        logger.info("Creating profile for user %s", request.user_id)
        try:
            response = self.client.post("/api/users", json=request.to_json(), timeout=self.timeout)
        except httpx.HTTPError as e:
            logger.error("Request error creating profile: %s", e)
            raise ProfileServiceError(f"Failed to reach profile service: {e}") from e

        if response.is_success:
            return ProfileCreated(status_code=response.status_code)
        return ProfileRejected(status_code=response.status_code, error=_error_message(response))


def _error_message(response: httpx.Response) -> str | None:
    """Extract {"error": "..."} from a failure body, None if absent or unparsable."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None
