"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition and timing tests.
Skipped when PostgreSQL is not reachable.
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from storefront_auth.adapters.repository.postgres import (
    PostgresAccountRepository,
    run_migrations,
)
from storefront_auth.adapters.tokens.jwt import JWTTokenIssuer
from storefront_auth.config.settings import get_settings
from storefront_auth.domain.accounts import AccountService

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool for adversarial tests."""
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
def pg_service(pool: ConnectionPool) -> AccountService:
    """Account service over the PostgreSQL repository."""
    return AccountService(
        repository=PostgresAccountRepository(pool),
        token_issuer=JWTTokenIssuer("adversarial-secret"),
    )


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean the user table before each test."""
    with pool.connection() as conn:
        conn.execute('DELETE FROM "user"')
        conn.commit()
    yield
