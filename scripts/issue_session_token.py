"""Issue a development session token for a role and optional permission list.

Usage:
    uv run python -m scripts.issue_session_token <user_id> <role> [permission ...]
Permissions are resource:action strings (e.g. inventory:read). With none,
the session is answered from the role table. Requires SECRET_KEY.
"""

import sys

from app.application.services.role_policy import get_role_dashboard_url
from app.core.config import get_settings
from app.domain.enums import Role
from app.domain.exceptions import ValidationException
from app.infrastructure.security.jwt import create_session_token


def main() -> None:
    """Print a signed session token to stdout."""
    if len(sys.argv) < 3:
        print(
            "Usage: uv run python -m scripts.issue_session_token <user_id> <role> [permission ...]",
            file=sys.stderr,
        )
        sys.exit(1)
    user_id = sys.argv[1]
    role = sys.argv[2]
    permissions = sys.argv[3:]

    if Role.parse(role) is None:
        print(
            f"Unknown role: {role} (expected one of {', '.join(Role.values())})",
            file=sys.stderr,
        )
        sys.exit(1)

    settings = get_settings()
    try:
        token = create_session_token(user_id, role, permissions)
    except ValidationException as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)
    print(token)
    print(
        f"role={role} permissions={len(permissions)} "
        f"expires_in={settings.access_token_expire_minutes}m "
        f"landing={get_role_dashboard_url(role, settings.dashboard_url)}",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
