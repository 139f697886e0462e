"""
Role-based ability construction.

Roles are cumulative, each one adds grants on top of the previous:
    member < viewer < interactive_viewer < editor < developer < admin

The organization role is applied to every project of the organization
(conditions on organizationUuid). Project roles only apply to their project
(conditions on projectUuid).
"""

from enum import Enum
from typing import Mapping, Optional

from dashcomments.domain.authorization.ability import Ability, Grant
from dashcomments.domain.authorization.vocabulary import Action, ResourceTag


class Role(str, Enum):
    MEMBER = "member"
    VIEWER = "viewer"
    INTERACTIVE_VIEWER = "interactive_viewer"
    EDITOR = "editor"
    DEVELOPER = "developer"
    ADMIN = "admin"


_ROLE_ORDER = [
    Role.MEMBER,
    Role.VIEWER,
    Role.INTERACTIVE_VIEWER,
    Role.EDITOR,
    Role.DEVELOPER,
    Role.ADMIN,
]

# Grants introduced at each role level, without conditions.
# Space view from a role only covers public spaces (see space_access).
_ROLE_GRANTS: dict[Role, list[tuple[Action, ResourceTag]]] = {
    Role.MEMBER: [],
    Role.VIEWER: [
        (Action.VIEW, ResourceTag.PROJECT),
        (Action.VIEW, ResourceTag.DASHBOARD),
        (Action.VIEW, ResourceTag.SPACE),
        (Action.VIEW, ResourceTag.DASHBOARD_COMMENTS),
    ],
    Role.INTERACTIVE_VIEWER: [
        (Action.CREATE, ResourceTag.DASHBOARD_COMMENTS),
    ],
    Role.EDITOR: [
        (Action.MANAGE, ResourceTag.DASHBOARD),
        (Action.MANAGE, ResourceTag.DASHBOARD_COMMENTS),
    ],
    Role.DEVELOPER: [
        (Action.UPDATE, ResourceTag.PROJECT),
    ],
    Role.ADMIN: [
        (Action.MANAGE, ResourceTag.SPACE),
        (Action.MANAGE, ResourceTag.PROJECT),
    ],
}


def _parse_role(role: str | Role) -> Role:
    try:
        return Role(role)
    except ValueError:
        raise ValueError(
            f"Invalid role: {role}. Must be one of {[r.value for r in Role]}."
        )


def role_grants(role: str | Role, conditions: Mapping[str, str]) -> list[Grant]:
    """All grants of `role` and the roles below it, scoped by `conditions`."""
    parsed = _parse_role(role)
    grants: list[Grant] = []
    for level in _ROLE_ORDER[: _ROLE_ORDER.index(parsed) + 1]:
        for action, resource in _ROLE_GRANTS[level]:
            grants.append(Grant(action, resource, dict(conditions)))
    return grants


def build_ability(
    organization_uuid: str,
    organization_role: Optional[str] = None,
    project_roles: Optional[Mapping[str, str]] = None,
) -> Ability:
    grants: list[Grant] = []
    if organization_role:
        grants.extend(
            role_grants(organization_role, {"organizationUuid": organization_uuid})
        )
    for project_uuid, role in (project_roles or {}).items():
        grants.extend(role_grants(role, {"projectUuid": project_uuid}))
    return Ability(grants)
