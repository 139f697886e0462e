"""
Space visibility predicate.

Rules, in order:
1. A user never sees spaces of another organization.
2. Managing spaces (admins) grants access to every space in scope.
3. Public spaces are visible to anyone who can view spaces in the project.
4. Private spaces are visible only to users they were shared with.
"""

from dashcomments.domain.authorization.decision import AccessDecision
from dashcomments.domain.authorization.vocabulary import Action, ResourceTag
from dashcomments.domain.entities.session_user import SessionUser
from dashcomments.domain.entities.space import SpaceSummary


def has_space_access(user: SessionUser, space: SpaceSummary) -> AccessDecision:
    if user.organization_uuid.value != space.organization_uuid:
        return AccessDecision.DENIED

    attrs = {
        "organizationUuid": space.organization_uuid,
        "projectUuid": space.project_uuid,
    }
    if user.ability.can(Action.MANAGE, ResourceTag.SPACE, attrs):
        return AccessDecision.ALLOWED

    if not space.is_private:
        if user.ability.can(Action.VIEW, ResourceTag.SPACE, attrs):
            return AccessDecision.ALLOWED
        return AccessDecision.DENIED

    if user.user_uuid.value in space.access:
        return AccessDecision.ALLOWED
    return AccessDecision.DENIED
