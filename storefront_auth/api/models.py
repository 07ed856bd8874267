"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Password strength is not validated here: weak passwords are a domain
rule answered with 400, not a schema error.
"""

from pydantic import BaseModel, EmailStr, Field

from storefront_auth.domain.ports import Account


class SignupRequest(BaseModel):
    """Request model for POST /signup."""

    user_id: str | None = Field(
        default=None,
        description="Caller-chosen identifier; generated when omitted",
    )
    user_name: str
    email: EmailStr
    user_password: str
    is_vendor: bool = False


class SignupResponse(BaseModel):
    """Response model for successful signup."""

    message: str


class RegisterRequest(BaseModel):
    """Request model for POST /register."""

    email: EmailStr
    password: str
    username: str
    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None
    is_vendor: bool = False


class RegisteredUser(BaseModel):
    """Profile payload returned by /register (echoes the request)."""

    user_id: str
    user_name: str
    email: str
    is_vendor: bool
    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    token: str
    user: RegisteredUser
    message: str


class LoginRequest(BaseModel):
    """Request model for POST /login."""

    email: str
    password: str


class LoginUser(BaseModel):
    """
    User payload returned by /login.

    Legacy clients read the identifier as either ``user_id`` or ``id`` and
    the display name as either ``username`` or ``user_name``; both spellings
    are filled from the same value. Keep the aliasing here, at the
    serialization boundary, and nowhere else.
    """

    user_id: str
    id: str
    email: str
    username: str
    user_name: str
    is_vendor: bool
    paid_user: bool = False
    first_name: str = ""
    last_name: str = ""
    address: str = ""

    @classmethod
    def from_account(cls, account: Account) -> "LoginUser":
        return cls(
            user_id=account.user_id,
            id=account.user_id,
            email=account.email,
            username=account.user_name,
            user_name=account.user_name,
            is_vendor=account.is_vendor,
            paid_user=account.paid_user or False,
            first_name=account.first_name or "",
            last_name=account.last_name or "",
            address=account.address or "",
        )


class LoginResponse(BaseModel):
    """Response model for successful login."""

    message: str
    token: str
    user: LoginUser


class TokenClaims(BaseModel):
    """Claims carried by a bearer token."""

    user_id: str
    email: str
    is_vendor: bool
    iat: int
    exp: int


class ErrorResponse(BaseModel):
    """Error body used by /signup."""

    error: str


class MessageResponse(BaseModel):
    """Error body used by /register and /login."""

    message: str
