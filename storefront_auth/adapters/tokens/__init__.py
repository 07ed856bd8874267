"""Token adapters - Bearer token implementations."""

from .jwt import JWTTokenIssuer

__all__ = ["JWTTokenIssuer"]
