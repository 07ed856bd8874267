"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the Account entity and the interfaces (ports) that
the domain requires from infrastructure. Adapters implement these protocols.
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class Account:
    """
    A registered storefront user (vendor or customer).

    The remote store owns the canonical record; instances are transient
    per-request copies. ``password_hash`` is always a bcrypt digest.
    """

    user_id: str
    user_name: str
    email: str
    password_hash: str
    is_vendor: bool = False
    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None
    paid_user: bool = False


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    def insert(self, account: Account) -> None:
        """
        Insert an account without any existence check.

        Raises:
            AccountStoreError: On any store failure, duplicate keys included
        """
        ...

    def insert_if_absent(self, account: Account) -> bool:
        """
        Atomically insert an account unless its email is already taken.

        Returns:
            True if the account was inserted, False if the email exists

        Raises:
            AccountStoreError: On any other store failure
        """
        ...

    def find_by_email(self, email: str) -> Account | None:
        """
        Return the first account stored under ``email``, or None.

        Raises:
            AccountStoreError: On store failure
        """
        ...


class TokenIssuer(Protocol):
    """Port interface for signed, time-limited bearer tokens."""

    def issue(self, claims: dict[str, Any], ttl_seconds: int) -> str:
        """Sign ``claims`` into a token that expires after ``ttl_seconds``."""
        ...

    def verify(self, token: str) -> dict[str, Any]:
        """
        Return the claims of a valid token.

        Raises:
            InvalidToken: If the token is malformed, forged or expired
        """
        ...


class IdentifierGenerator(Protocol):
    """Port interface for account identifier assignment."""

    def __call__(self) -> str: ...
