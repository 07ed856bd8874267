"""
Password policies and credential hashing.

Two entry points accept new passwords and each enforces its own symbol
set, so the policies are kept as two named validators rather than merged:

- SIGNUP_PASSWORD_POLICY:   symbols !@#$%^&*
- REGISTER_PASSWORD_POLICY: symbols @$!%*?&

Both require at least 8 characters drawn only from ASCII letters, ASCII
digits and the policy's symbols, with at least one of each class.
"""

import re
from dataclasses import dataclass, field

import bcrypt

from .exceptions import PasswordHashingError

DEFAULT_BCRYPT_ROUNDS = 10

# bcrypt only reads the first 72 bytes; longer input is truncated, not rejected
BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class PasswordPolicy:
    """Regular-expression password strength rule."""

    name: str
    symbols: str
    message: str
    min_length: int = 8
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        symbols = re.escape(self.symbols)
        pattern = re.compile(
            rf"(?=.*[A-Za-z])(?=.*[0-9])(?=.*[{symbols}])"
            rf"[A-Za-z0-9{symbols}]{{{self.min_length},}}"
        )
        object.__setattr__(self, "_pattern", pattern)

    def is_valid(self, password: object) -> bool:
        """Return True if ``password`` satisfies this policy."""
        if not isinstance(password, str):
            return False
        return self._pattern.fullmatch(password) is not None


SIGNUP_PASSWORD_POLICY = PasswordPolicy(
    name="signup",
    symbols="!@#$%^&*",
    message="Password must be 8+ chars, include a number, letter & special character.",
)

REGISTER_PASSWORD_POLICY = PasswordPolicy(
    name="register",
    symbols="@$!%*?&",
    message=(
        "Password must be at least 8 characters long and include "
        "1 letter, 1 number, and 1 symbol."
    ),
)


def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """
    Hash password using bcrypt with a fixed cost factor.

    Raises:
        PasswordHashingError: If bcrypt rejects the input
    """
    try:
        return bcrypt.hashpw(_bcrypt_input(password), bcrypt.gensalt(rounds=rounds)).decode()
    except (ValueError, TypeError) as e:
        raise PasswordHashingError("Password hashing failed") from e


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(_bcrypt_input(password), password_hash.encode())
    except (ValueError, TypeError):
        return False


def _bcrypt_input(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]
