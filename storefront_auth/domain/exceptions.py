"""
Domain exceptions - Semantic error types for accounts.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class AccountError(Exception):
    """Base class for account domain errors."""

    pass


class WeakPassword(AccountError):
    """Password does not satisfy the password policy of the entry point."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmailAlreadyRegistered(AccountError):
    """An account with this email already exists."""

    pass


class InvalidCredentials(AccountError):
    """Unknown email or wrong password (deliberately indistinguishable)."""

    pass


class AccountStoreError(AccountError):
    """The remote store rejected or failed an operation."""

    pass


class PasswordHashingError(AccountError):
    """The password could not be hashed."""

    pass


class InvalidToken(AccountError):
    """Bearer token is malformed, forged or expired."""

    pass
