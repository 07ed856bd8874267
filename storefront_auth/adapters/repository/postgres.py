"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL against the hosted store's
``"user"`` table.

Duplicate-email protection relies on the table's UNIQUE (email)
constraint: ``insert_if_absent`` is a single INSERT ... ON CONFLICT DO
NOTHING, so two concurrent registrations cannot both succeed.
"""

import logging
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from storefront_auth.domain.exceptions import AccountStoreError
from storefront_auth.domain.ports import Account

logger = logging.getLogger(__name__)

_COLUMNS = (
    "user_id, user_name, email, user_password, is_vendor, "
    "first_name, last_name, address, paid_user"
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
        Insert an account with no existence check.

        Any failure, a duplicate user_id or email included, is reported
        as AccountStoreError.
        """
        sql = f"""
            INSERT INTO "user" ({_COLUMNS})
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, _params(account))
                conn.commit()
        except psycopg.Error as e:
            logger.error("Account insert failed: %s", e)
            raise AccountStoreError("Account insert failed") from e

    def insert_if_absent(self, account: Account) -> bool:
        """
        Atomically insert an account unless the email is already stored.

        Returns:
            True if inserted, False if an account with the email exists
        """
        sql = f"""
            INSERT INTO "user" ({_COLUMNS})
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
            ON CONFLICT (email) DO NOTHING
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, _params(account))
                conn.commit()
                # 0 rows means the email constraint absorbed the insert
                return cursor.rowcount == 1
        except psycopg.Error as e:
            logger.error("Conditional account insert failed: %s", e)
            raise AccountStoreError("Account insert failed") from e

    def find_by_email(self, email: str) -> Account | None:
        """Return the oldest account stored under ``email``, or None."""
        sql = f"""
            SELECT {_COLUMNS}
            FROM "user"
            WHERE email = %s
            ORDER BY created_at
            LIMIT 1
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email,))
                row = cursor.fetchone()
        except psycopg.Error as e:
            logger.error("Account lookup failed: %s", e)
            raise AccountStoreError("Account lookup failed") from e

        if row is None:
            return None

        return Account(
            user_id=row[0],
            user_name=row[1],
            email=row[2],
            password_hash=row[3],
            is_vendor=bool(row[4]),
            first_name=row[5],
            last_name=row[6],
            address=row[7],
            paid_user=bool(row[8]),
        )


def _params(account: Account) -> tuple:
    return (
        account.user_id,
        account.user_name,
        account.email,
        account.password_hash,
        account.is_vendor,
        account.first_name,
        account.last_name,
        account.address,
        account.paid_user,
    )


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: storefront_auth/adapters/repository/postgres.py -> storefront_auth/migrations/
    migrations_dir = Path(__file__).parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
