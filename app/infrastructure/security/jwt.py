"""Session token creation and verification.

A session token carries the actor the authorization engine decides for:
``sub`` (user id), ``role``, ``permissions`` (the dynamic grant list, may be
empty) and ``exp`` (session expiry). Uses app.core.config for secret and
algorithm.
"""

from collections.abc import Iterable
from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.core.config import get_settings
from app.domain.exceptions import ValidationException
from app.domain.value_objects.core import Actor, PermissionCode, normalize_permissions
from app.shared.utils.datetime import from_timestamp_utc, utc_now


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with the given claims.

    Args:
        data: Claims to encode (e.g. sub, role, permissions).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = utc_now() + expires_delta
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def create_session_token(
    user_id: str,
    role: str,
    permissions: Iterable[str] | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a session token for user_id with role and its grant list.

    Raises:
        ValidationException: If a grant is not a ``resource:action`` string.
    """
    grants = normalize_permissions(permissions)
    malformed = sorted(p for p in grants if PermissionCode.parse(p) is None)
    if malformed:
        raise ValidationException(
            f"Malformed permissions: {', '.join(malformed)}", field="permissions"
        )
    return create_access_token(
        {
            "sub": user_id,
            "role": role,
            "permissions": sorted(grants),
        },
        expires_delta=expires_delta,
    )


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub. Raises ValueError if the token is
    invalid, expired, or missing required claims.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    return payload


def actor_from_claims(claims: dict[str, Any]) -> Actor:
    """Build the Actor for decoded session claims.

    A missing or non-string role becomes an empty role, which every lookup
    denies. A non-list ``permissions`` claim is treated as no grants.
    """
    role = claims.get("role")
    raw_permissions = claims.get("permissions")
    if not isinstance(raw_permissions, list):
        raw_permissions = []
    exp = claims.get("exp")
    return Actor(
        role=role if isinstance(role, str) else "",
        permissions=normalize_permissions(raw_permissions),
        user_id=str(claims["sub"]) if claims.get("sub") is not None else None,
        session_expires_at=from_timestamp_utc(exp) if isinstance(exp, (int, float)) else None,
    )
