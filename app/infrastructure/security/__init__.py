"""Security: session token creation and verification."""

from app.infrastructure.security.jwt import (
    actor_from_claims,
    create_access_token,
    create_session_token,
    verify_token,
)

__all__ = [
    "actor_from_claims",
    "create_access_token",
    "create_session_token",
    "verify_token",
]
