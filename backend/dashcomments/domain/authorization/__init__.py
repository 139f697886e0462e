"""
AUTHORIZATION - Capability vocabulary and ability evaluation

An ability is a set of grants. Each grant allows one action on one resource
type, optionally restricted by attribute conditions (projectUuid,
organizationUuid). Services ask `ability.can(action, resource, attrs)`.
"""

from dashcomments.domain.authorization.vocabulary import Action, ResourceTag
from dashcomments.domain.authorization.ability import Ability, Grant
from dashcomments.domain.authorization.decision import AccessDecision
from dashcomments.domain.authorization.roles import Role, build_ability

__all__ = [
    "Action",
    "ResourceTag",
    "Ability",
    "Grant",
    "AccessDecision",
    "Role",
    "build_ability",
]
