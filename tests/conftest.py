"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- An in-memory AccountRepository with the same uniqueness rules as the store
- A token issuer with a fixed test secret
- A FastAPI test client wired to both
"""

import threading
from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from storefront_auth.adapters.tokens.jwt import JWTTokenIssuer
from storefront_auth.api.dependencies import get_account_service, get_token_issuer
from storefront_auth.api.routes import router
from storefront_auth.domain.accounts import AccountService
from storefront_auth.domain.exceptions import AccountStoreError
from storefront_auth.domain.ports import Account

TEST_SECRET = "test-secret"


class InMemoryAccountRepository:
    """AccountRepository test double enforcing unique user_id and email."""

    def __init__(self) -> None:
        self.accounts: list[Account] = []
        self._lock = threading.Lock()

    def _conflicts(self, account: Account) -> bool:
        return any(
            a.user_id == account.user_id or a.email == account.email for a in self.accounts
        )

    def insert(self, account: Account) -> None:
        with self._lock:
            if self._conflicts(account):
                raise AccountStoreError("duplicate key value violates unique constraint")
            self.accounts.append(account)

    def insert_if_absent(self, account: Account) -> bool:
        with self._lock:
            if any(a.email == account.email for a in self.accounts):
                return False
            if self._conflicts(account):
                raise AccountStoreError("duplicate key value violates unique constraint")
            self.accounts.append(account)
            return True

    def find_by_email(self, email: str) -> Account | None:
        with self._lock:
            for account in self.accounts:
                if account.email == email:
                    return account
        return None


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    """Fresh in-memory repository for each test."""
    return InMemoryAccountRepository()


@pytest.fixture
def token_issuer() -> JWTTokenIssuer:
    """Token issuer with a fixed test secret."""
    return JWTTokenIssuer(TEST_SECRET)


@pytest.fixture
def service(
    repository: InMemoryAccountRepository, token_issuer: JWTTokenIssuer
) -> AccountService:
    """Account service over the in-memory repository."""
    return AccountService(repository=repository, token_issuer=token_issuer)


@pytest.fixture
def app(service: AccountService, token_issuer: JWTTokenIssuer) -> Generator[FastAPI, None, None]:
    """Test FastAPI application using the in-memory service."""
    test_app = FastAPI()
    test_app.include_router(router)
    test_app.dependency_overrides[get_account_service] = lambda: service
    test_app.dependency_overrides[get_token_issuer] = lambda: token_issuer
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the application."""
    return TestClient(app)
