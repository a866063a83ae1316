"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

The accounts table carries a UNIQUE index on email. The domain checks
email availability before inserting, but nothing locks the row between
that check and the INSERT; the index is what actually prevents two
concurrent registrations from sharing an email. A violation is reported
to the domain as EmailAlreadyRegistered.
"""

import logging
from pathlib import Path
from uuid import UUID

from psycopg import errors
from psycopg_pool import ConnectionPool

from src.domain.exceptions import EmailAlreadyRegistered
from src.domain.models import Account

logger = logging.getLogger(__name__)

_COLUMNS = "id, email, password_hash, full_name, created_at"


def _to_account(row: tuple) -> Account:
    return Account(
        id=row[0],
        email=row[1],
        password_hash=row[2],
        full_name=row[3],
        created_at=row[4],
    )


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def insert(self, account: Account) -> None:
        """
        Insert a new account row.

        Raises:
            EmailAlreadyRegistered: If the unique email index rejects the row
        """
        sql = f"""
            INSERT INTO accounts ({_COLUMNS})
            VALUES (%s, %s, %s, %s, %s)
        """
        logger.debug("Adding new account to database: %s", account.email)
        try:
            with self._pool.connection() as conn:
                conn.execute(
                    sql,
                    (
                        account.id,
                        account.email,
                        account.password_hash,
                        account.full_name,
                        account.created_at,
                    ),
                )
        except errors.UniqueViolation as e:
            raise EmailAlreadyRegistered(account.email) from e

    def find_by_email(self, email: str) -> Account | None:
        sql = f"SELECT {_COLUMNS} FROM accounts WHERE email = %s"
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()
        return _to_account(row) if row is not None else None

    def find_by_id(self, account_id: UUID) -> Account | None:
        sql = f"SELECT {_COLUMNS} FROM accounts WHERE id = %s"
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (account_id,))
            row = cursor.fetchone()
        return _to_account(row) if row is not None else None

    def exists_by_email(self, email: str) -> bool:
        sql = "SELECT 1 FROM accounts WHERE email = %s"
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            return cursor.fetchone() is not None

    def delete(self, account_id: UUID) -> bool:
        """
        Delete an account by id.

        Returns:
            True if a row was removed, False if no such account exists
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("DELETE FROM accounts WHERE id = %s", (account_id,))
            return cursor.rowcount == 1

    def update_password_hash(self, account_id: UUID, password_hash: str) -> bool:
        sql = "UPDATE accounts SET password_hash = %s WHERE id = %s"
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (password_hash, account_id))
            return cursor.rowcount == 1


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            with pool.connection() as conn:
                conn.execute(sql_file.read_text())

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
