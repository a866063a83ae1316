"""
Shared test fixtures and configuration.

This module provides:
- In-memory fakes for the domain ports (account store, profile service,
  password hasher)
- A valid registration request factory
- A PostgreSQL connection pool that skips dependent tests when the
  database is unreachable
"""

import threading
import time
from collections.abc import Generator
from dataclasses import replace
from uuid import UUID

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings
from src.domain.exceptions import EmailAlreadyRegistered
from src.domain.models import (
    Account,
    ProfileCreated,
    ProfileRequest,
    ProfileResult,
    RegistrationRequest,
)
from src.domain.registration import RegistrationService


class InMemoryAccountRepository:
    """
    AccountRepository backed by a dict, with a unique email constraint.

    Set `failures[method_name] = exc` to make a method raise.
    """

    def __init__(self) -> None:
        self.accounts: dict[UUID, Account] = {}
        self.failures: dict[str, Exception] = {}
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def _enter(self, method: str) -> None:
        self.calls.append(method)
        if method in self.failures:
            raise self.failures[method]

    def insert(self, account: Account) -> None:
        self._enter("insert")
        with self._lock:
            if any(a.email == account.email for a in self.accounts.values()):
                raise EmailAlreadyRegistered(account.email)
            self.accounts[account.id] = replace(account)

    def find_by_email(self, email: str) -> Account | None:
        self._enter("find_by_email")
        with self._lock:
            return next((a for a in self.accounts.values() if a.email == email), None)

    def find_by_id(self, account_id: UUID) -> Account | None:
        self._enter("find_by_id")
        with self._lock:
            return self.accounts.get(account_id)

    def exists_by_email(self, email: str) -> bool:
        self._enter("exists_by_email")
        with self._lock:
            return any(a.email == email for a in self.accounts.values())

    def delete(self, account_id: UUID) -> bool:
        self._enter("delete")
        with self._lock:
            return self.accounts.pop(account_id, None) is not None

    def update_password_hash(self, account_id: UUID, password_hash: str) -> bool:
        self._enter("update_password_hash")
        with self._lock:
            account = self.accounts.get(account_id)
            if account is None:
                return False
            account.password_hash = password_hash
            return True


class StubProfileDirectory:
    """
    ProfileDirectory double.

    phone_result / create_result may be a value to return or an
    exception to raise. `delay` simulates remote latency in seconds.
    """

    def __init__(
        self,
        phone_result: bool | BaseException = False,
        create_result: ProfileResult | BaseException | None = None,
        delay: float = 0.0,
    ) -> None:
        self.phone_result = phone_result
        self.create_result = create_result if create_result is not None else ProfileCreated()
        self.delay = delay
        self.phone_checks: list[str] = []
        self.created: list[ProfileRequest] = []

    def phone_exists(self, phone_number: str) -> bool:
        self.phone_checks.append(phone_number)
        if self.delay:
            time.sleep(self.delay)
        if isinstance(self.phone_result, BaseException):
            raise self.phone_result
        return self.phone_result

    def create_profile(self, request: ProfileRequest) -> ProfileResult:
        self.created.append(request)
        if self.delay:
            time.sleep(self.delay)
        if isinstance(self.create_result, BaseException):
            raise self.create_result
        return self.create_result


class PlainPasswordHasher:
    """Reversible stand-in for bcrypt so tests stay fast."""

    def hash(self, plaintext: str) -> str:
        return f"hashed:{plaintext}"

    def verify(self, plaintext: str, hashed: str) -> bool:
        return hashed == f"hashed:{plaintext}"


def make_request(**overrides) -> RegistrationRequest:
    """Build a registration request that passes validation."""
    fields = {
        "email": "jane.doe@example.com",
        "password": "Password123!",
        "confirm_password": "Password123!",
        "full_name": "Jane Doe",
        "phone_number": "+15551234567",
        "address": "1 Main Street",
    }
    fields.update(overrides)
    return RegistrationRequest(**fields)


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def profiles() -> StubProfileDirectory:
    return StubProfileDirectory()


@pytest.fixture
def hasher() -> PlainPasswordHasher:
    return PlainPasswordHasher()


@pytest.fixture
def valid_request() -> RegistrationRequest:
    return make_request()


@pytest.fixture
def make_registration():
    """Factory fixture: make_registration(email=...) -> RegistrationRequest."""
    return make_request


@pytest.fixture
def service(
    repository: InMemoryAccountRepository,
    hasher: PlainPasswordHasher,
    profiles: StubProfileDirectory,
) -> RegistrationService:
    return RegistrationService(repository=repository, hasher=hasher, profiles=profiles)


@pytest.fixture(scope="session")
def pg_pool() -> Generator[ConnectionPool, None, None]:
    """
    Connection pool for tests that need PostgreSQL.

    Skips the requesting test when the database cannot be reached.
    """
    settings = get_settings()
    pool = ConnectionPool(conninfo=settings.database_url, min_size=1, max_size=10, open=True)
    try:
        pool.wait(timeout=3.0)
    except PoolTimeout:
        pool.close()
        pytest.skip(f"PostgreSQL not reachable at {settings.database_url}")
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_accounts(pg_pool: ConnectionPool) -> Generator[ConnectionPool, None, None]:
    """Empty the accounts table before each test."""
    with pg_pool.connection() as conn:
        conn.execute("DELETE FROM accounts")
    yield pg_pool
