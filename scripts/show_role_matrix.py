"""Print the static role -> resource -> actions table.

Usage:
    uv run python -m scripts.show_role_matrix [role]
Does not need SECRET_KEY (no settings are loaded).
"""

import sys

from app.application.services.role_permissions import get_allowed_actions
from app.domain.enums import Action, Resource, Role


def _row(role: Role) -> list[str]:
    lines = [f"{role.value}:"]
    for resource in Resource:
        allowed = get_allowed_actions(role, resource)
        actions = [a.value for a in Action if a in allowed]
        lines.append(f"  {resource.value:<12} {', '.join(actions) or '-'}")
    return lines


def main() -> None:
    """Print the table for one role, or for every role."""
    roles = list(Role)
    if len(sys.argv) > 1:
        role = Role.parse(sys.argv[1])
        if role is None:
            print(f"Unknown role: {sys.argv[1]}", file=sys.stderr)
            sys.exit(1)
        roles = [role]
    for role in roles:
        print("\n".join(_row(role)))


if __name__ == "__main__":
    main()
