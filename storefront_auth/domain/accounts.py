"""
Account domain service - signup, registration and login.

Three stateless flows share one repository and one token issuer:

- signup:   validate (signup policy) -> hash -> plain insert
- register: validate (register policy) -> hash -> conditional insert
            keyed on email -> 1-day token
- login:    lookup by email -> bcrypt verify -> 7-day token

"Logged in" exists only as a token held by the client; nothing about a
session is persisted.
"""

import logging
import uuid
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from .exceptions import EmailAlreadyRegistered, InvalidCredentials, WeakPassword
from .passwords import (
    DEFAULT_BCRYPT_ROUNDS,
    REGISTER_PASSWORD_POLICY,
    SIGNUP_PASSWORD_POLICY,
    hash_password,
    verify_password,
)
from .ports import Account, AccountRepository, IdentifierGenerator, TokenIssuer

logger = logging.getLogger(__name__)

REGISTER_TOKEN_TTL_SECONDS = 24 * 60 * 60
LOGIN_TOKEN_TTL_SECONDS = 7 * 24 * 60 * 60


# Verified against when the email is unknown so login timing does not
# reveal whether an account exists. Cached per cost factor so it costs
# the same as verifying a real hash.
@lru_cache
def _dummy_hash(rounds: int) -> str:
    return hash_password("dummy_password_for_timing_safety", rounds)


def generate_user_id() -> str:
    """Collision-resistant account identifier (random UUID, hex form)."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Session:
    """A freshly issued bearer token and the account it was issued for."""

    token: str
    account: Account


@dataclass
class AccountService:
    """
    Domain service for storefront accounts.

    Raises domain exceptions only; HTTP translation happens in the API layer.
    """

    repository: AccountRepository
    token_issuer: TokenIssuer
    generate_id: IdentifierGenerator = field(default=generate_user_id)
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS
    register_token_ttl: int = REGISTER_TOKEN_TTL_SECONDS
    login_token_ttl: int = LOGIN_TOKEN_TTL_SECONDS

    def signup(
        self,
        user_name: str,
        email: str,
        password: str,
        is_vendor: bool = False,
        user_id: str | None = None,
    ) -> Account:
        """
        Create an account without issuing a token.

        A caller-supplied ``user_id`` is honored as-is; no uniqueness
        pre-check is made, so a duplicate surfaces as AccountStoreError.

        Raises:
            WeakPassword: Password fails the signup policy
            PasswordHashingError: Password could not be hashed
            AccountStoreError: The store rejected the insert
        """
        if not SIGNUP_PASSWORD_POLICY.is_valid(password):
            raise WeakPassword(SIGNUP_PASSWORD_POLICY.message)

        account = Account(
            user_id=user_id or self.generate_id(),
            user_name=user_name,
            email=self._normalize_email(email),
            password_hash=hash_password(password, self.bcrypt_rounds),
            is_vendor=bool(is_vendor),
        )
        self.repository.insert(account)
        logger.info("Account created via signup: %s", account.user_id)
        return account

    def register(
        self,
        email: str,
        password: str,
        username: str,
        first_name: str | None = None,
        last_name: str | None = None,
        address: str | None = None,
        is_vendor: bool = False,
    ) -> Session:
        """
        Create an account with profile fields and issue a 1-day token.

        Raises:
            WeakPassword: Password fails the register policy
            EmailAlreadyRegistered: An account with the email exists
            PasswordHashingError: Password could not be hashed
            AccountStoreError: The store failed
        """
        if not REGISTER_PASSWORD_POLICY.is_valid(password):
            raise WeakPassword(REGISTER_PASSWORD_POLICY.message)

        normalized_email = self._normalize_email(email)
        account = Account(
            user_id=self.generate_id(),
            user_name=username,
            email=normalized_email,
            password_hash=hash_password(password, self.bcrypt_rounds),
            is_vendor=bool(is_vendor),
            first_name=first_name,
            last_name=last_name,
            address=address,
        )

        if not self.repository.insert_if_absent(account):
            raise EmailAlreadyRegistered(normalized_email)

        logger.info("Account registered: %s", account.user_id)
        token = self.token_issuer.issue(self._claims(account), self.register_token_ttl)
        return Session(token=token, account=account)

    def login(self, email: str, password: str) -> Session:
        """
        Verify credentials and issue a 7-day token.

        Unknown email and wrong password raise the same exception.

        Raises:
            InvalidCredentials: Email unknown or password mismatch
            AccountStoreError: The store failed
        """
        normalized_email = self._normalize_email(email)
        account = self.repository.find_by_email(normalized_email)

        # Always run bcrypt, even for unknown emails
        if account is not None:
            stored_hash = account.password_hash
        else:
            stored_hash = _dummy_hash(self.bcrypt_rounds)
        password_valid = verify_password(password, stored_hash)

        if account is None or not password_valid:
            raise InvalidCredentials()

        token = self.token_issuer.issue(self._claims(account), self.login_token_ttl)
        return Session(token=token, account=account)

    def _normalize_email(self, email: str) -> str:
        """
        Normalize email address for consistent storage and lookup.

        Applies: strip whitespace + lowercase
        """
        return email.strip().lower()

    def _claims(self, account: Account) -> dict[str, Any]:
        return {
            "user_id": account.user_id,
            "email": account.email,
            "is_vendor": account.is_vendor,
        }
