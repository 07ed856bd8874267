"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from typing import Any

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from psycopg_pool import ConnectionPool

from storefront_auth.adapters.repository.postgres import PostgresAccountRepository
from storefront_auth.adapters.tokens.jwt import JWTTokenIssuer
from storefront_auth.config.settings import get_settings
from storefront_auth.domain.accounts import AccountService
from storefront_auth.domain.exceptions import InvalidToken


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresAccountRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresAccountRepository(pool)


def get_token_issuer() -> JWTTokenIssuer:
    """Create token issuer from settings."""
    settings = get_settings()
    return JWTTokenIssuer(settings.jwt_secret, settings.jwt_algorithm)


def get_account_service(request: Request) -> AccountService:
    """
    Create account service with injected dependencies.

    Wires together the repository and token issuer for the domain service.
    """
    settings = get_settings()
    return AccountService(
        repository=get_repository(request),
        token_issuer=get_token_issuer(),
        bcrypt_rounds=settings.bcrypt_cost,
        register_token_ttl=settings.register_token_ttl_seconds,
        login_token_ttl=settings.login_token_ttl_seconds,
    )


# Bearer token security scheme for OpenAPI documentation
http_bearer = HTTPBearer()


def get_token_claims(
    credentials: HTTPAuthorizationCredentials = Depends(http_bearer),
    token_issuer: JWTTokenIssuer = Depends(get_token_issuer),
) -> dict[str, Any]:
    """
    Validate the bearer token and return its claims.

    FastAPI's HTTPBearer rejects a missing or non-Bearer Authorization
    header before this runs.
    """
    try:
        return token_issuer.verify(credentials.credentials)
    except InvalidToken:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None
