"""
API routes - Account endpoints.

This module defines the HTTP endpoints:
- POST /signup   - Create an account (no token)
- POST /register - Create an account with profile and receive a 1-day token
- POST /login    - Exchange email/password for a 7-day token
- GET  /me       - Return the claims of the presented bearer token

Handlers are plain ``def`` functions: bcrypt and the psycopg pool block,
so FastAPI runs them in its threadpool.

Error bodies keep the shapes existing storefront clients read:
``{"error": ...}`` for /signup and ``{"message": ...}`` elsewhere.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from storefront_auth.api.dependencies import get_account_service, get_token_claims
from storefront_auth.api.models import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    LoginUser,
    MessageResponse,
    RegisteredUser,
    RegisterRequest,
    RegisterResponse,
    SignupRequest,
    SignupResponse,
    TokenClaims,
)
from storefront_auth.domain.accounts import AccountService
from storefront_auth.domain.exceptions import (
    AccountError,
    EmailAlreadyRegistered,
    InvalidCredentials,
    WeakPassword,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Weak password"},
        422: {"description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Store error"},
    },
    summary="Create an account",
)
def signup(
    request_data: SignupRequest,
    service: AccountService = Depends(get_account_service),
) -> Any:
    """
    Create an account. No token is issued.

    A duplicate ``user_id`` or email is reported as a generic 500.
    """
    try:
        service.signup(
            user_name=request_data.user_name,
            email=request_data.email,
            password=request_data.user_password,
            is_vendor=request_data.is_vendor,
            user_id=request_data.user_id,
        )
    except WeakPassword as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": e.message},
        )
    except AccountError as e:
        logger.error("Signup error: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Signup failed."},
        )
    return SignupResponse(message="User registered successfully.")


@router.post(
    "/register",
    response_model=RegisterResponse,
    responses={
        400: {"model": MessageResponse, "description": "Weak password or email taken"},
        422: {"description": "Validation error"},
        500: {"model": MessageResponse, "description": "Server error"},
    },
    summary="Register an account and receive a token",
)
def register(
    request_data: RegisterRequest,
    service: AccountService = Depends(get_account_service),
) -> Any:
    """
    Register an account with profile fields.

    Returns a 1-day bearer token and the submitted profile.
    """
    try:
        session = service.register(
            email=request_data.email,
            password=request_data.password,
            username=request_data.username,
            first_name=request_data.first_name,
            last_name=request_data.last_name,
            address=request_data.address,
            is_vendor=request_data.is_vendor,
        )
    except WeakPassword as e:
        return _message(status.HTTP_400_BAD_REQUEST, e.message)
    except EmailAlreadyRegistered:
        return _message(status.HTTP_400_BAD_REQUEST, "User with this email already exists.")
    except AccountError as e:
        logger.error("Register error: %s", e)
        return _message(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error during registration."
        )

    account = session.account
    return RegisterResponse(
        token=session.token,
        user=RegisteredUser(
            user_id=account.user_id,
            user_name=request_data.username,
            email=request_data.email,
            is_vendor=request_data.is_vendor,
            first_name=request_data.first_name,
            last_name=request_data.last_name,
            address=request_data.address,
        ),
        message="User registered successfully!",
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"model": MessageResponse, "description": "Invalid credentials"},
        422: {"description": "Validation error"},
        500: {"model": MessageResponse, "description": "Server error"},
    },
    summary="Log in with email and password",
)
def login(
    request_data: LoginRequest,
    service: AccountService = Depends(get_account_service),
) -> Any:
    """
    Exchange credentials for a 7-day bearer token.

    Unknown email and wrong password produce the same 401 body.
    """
    logger.info("Login attempt for email: %s", request_data.email)

    try:
        session = service.login(request_data.email, request_data.password)
    except InvalidCredentials:
        return _message(status.HTTP_401_UNAUTHORIZED, "Invalid credentials")
    except AccountError as e:
        logger.error("Login error: %s", e)
        return _message(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Login failed due to server error."
        )

    return LoginResponse(
        message="Login successful",
        token=session.token,
        user=LoginUser.from_account(session.account),
    )


@router.get(
    "/me",
    response_model=TokenClaims,
    responses={401: {"description": "Invalid or expired token"}},
    summary="Inspect the presented bearer token",
)
def me(claims: dict[str, Any] = Depends(get_token_claims)) -> TokenClaims:
    """Return the identity claims of the caller's token."""
    return TokenClaims(**claims)
