"""
Domain layer - Pure business logic with zero framework imports.

This package contains the account rules of the storefront: password
policies, credential hashing and the signup/register/login flows. It
defines its own port interfaces so that the remote store and the token
format stay behind adapters.
"""

from .accounts import AccountService, Session, generate_user_id
from .exceptions import (
    AccountError,
    AccountStoreError,
    EmailAlreadyRegistered,
    InvalidCredentials,
    InvalidToken,
    PasswordHashingError,
    WeakPassword,
)
from .passwords import (
    REGISTER_PASSWORD_POLICY,
    SIGNUP_PASSWORD_POLICY,
    PasswordPolicy,
    hash_password,
    verify_password,
)
from .ports import Account, AccountRepository, IdentifierGenerator, TokenIssuer

__all__ = [
    "Account",
    "AccountError",
    "AccountRepository",
    "AccountService",
    "AccountStoreError",
    "EmailAlreadyRegistered",
    "IdentifierGenerator",
    "InvalidCredentials",
    "InvalidToken",
    "PasswordHashingError",
    "PasswordPolicy",
    "REGISTER_PASSWORD_POLICY",
    "SIGNUP_PASSWORD_POLICY",
    "Session",
    "TokenIssuer",
    "WeakPassword",
    "generate_user_id",
    "hash_password",
    "verify_password",
]
