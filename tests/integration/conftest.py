"""
Shared fixtures for integration tests.

Requires PostgreSQL reachable at DATABASE_URL; every test in this
directory is skipped when it is not.
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from storefront_auth.adapters.repository.postgres import (
    PostgresAccountRepository,
    run_migrations,
)
from storefront_auth.config.settings import get_settings

pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool for integration tests, migrated."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    try:
        pool.wait(timeout=2.0)
    except PoolTimeout:
        pool.close()
        pytest.skip("PostgreSQL is not reachable")
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def pg_repository(pool: ConnectionPool) -> PostgresAccountRepository:
    """Create repository instance for each test."""
    return PostgresAccountRepository(pool)


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean the user table before each test."""
    with pool.connection() as conn:
        conn.execute('DELETE FROM "user"')
        conn.commit()
    yield
