"""
Unit tests for domain ports and exceptions.

Tests verify:
- Account entity defaults and immutability
- Exceptions are properly structured
- Domain purity (zero framework imports)
"""

import dataclasses
from pathlib import Path

import pytest

from storefront_auth.domain.exceptions import (
    AccountError,
    AccountStoreError,
    EmailAlreadyRegistered,
    InvalidCredentials,
    InvalidToken,
    PasswordHashingError,
    WeakPassword,
)
from storefront_auth.domain.ports import Account

DOMAIN_DIR = Path(__file__).parents[2] / "storefront_auth" / "domain"


class TestAccount:
    """Tests for the Account entity."""

    def test_optional_fields_default(self) -> None:
        """Profile fields are optional; flags default False."""
        account = Account(user_id="u", user_name="n", email="e@x.com", password_hash="h")
        assert account.is_vendor is False
        assert account.paid_user is False
        assert account.first_name is None
        assert account.last_name is None
        assert account.address is None

    def test_account_is_immutable(self) -> None:
        """Accounts are never updated in place."""
        account = Account(user_id="u", user_name="n", email="e@x.com", password_hash="h")
        with pytest.raises(dataclasses.FrozenInstanceError):
            account.email = "other@x.com"  # type: ignore[misc]


class TestDomainExceptions:
    """Tests for domain exceptions."""

    @pytest.mark.parametrize(
        "exc_type",
        [
            AccountStoreError,
            EmailAlreadyRegistered,
            InvalidCredentials,
            InvalidToken,
            PasswordHashingError,
            WeakPassword,
        ],
    )
    def test_inherits_account_error(self, exc_type: type) -> None:
        """All domain errors share one base."""
        assert issubclass(exc_type, AccountError)

    def test_weak_password_carries_message(self) -> None:
        """WeakPassword exposes the policy message."""
        exc = WeakPassword("Password too weak")
        assert exc.message == "Password too weak"
        assert str(exc) == "Password too weak"


class TestDomainPurity:
    """Tests for domain purity - zero framework imports."""

    @pytest.mark.parametrize("module", ["fastapi", "pydantic", "psycopg", "jose"])
    def test_no_framework_imports_in_domain(self, module: str) -> None:
        """Domain layer imports no framework or infrastructure library."""
        offenders = [
            path.name
            for path in DOMAIN_DIR.glob("*.py")
            for line in path.read_text().splitlines()
            if line.startswith((f"import {module}", f"from {module}"))
        ]
        assert offenders == [], f"{module} import found in: {offenders}"
