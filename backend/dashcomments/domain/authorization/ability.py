"""
Ability - Evaluates (action, resource, attributes) against a set of grants.

Matching rules:
- grant.resource must equal the requested resource
- grant.action must equal the requested action, or be MANAGE
- every condition on the grant must be present in attrs with an equal value

Example:
    ability = Ability([
        Grant(Action.VIEW, ResourceTag.DASHBOARD_COMMENTS, {"projectUuid": "p1"}),
    ])
    ability.can(Action.VIEW, ResourceTag.DASHBOARD_COMMENTS,
                {"projectUuid": "p1", "organizationUuid": "o1"})  # True
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from dashcomments.domain.authorization.vocabulary import Action, ResourceTag


@dataclass(frozen=True)
class Grant:
    action: Action
    resource: ResourceTag
    conditions: Mapping[str, str] = field(default_factory=dict)

    def matches(
        self, action: Action, resource: ResourceTag, attrs: Mapping[str, object]
    ) -> bool:
        if self.resource != resource:
            return False
        if self.action != action and self.action != Action.MANAGE:
            return False
        for key, expected in self.conditions.items():
            if key not in attrs or attrs[key] != expected:
                return False
        return True


class Ability:
    def __init__(self, grants: Iterable[Grant] = ()):
        self._grants: tuple[Grant, ...] = tuple(grants)

    @property
    def grants(self) -> tuple[Grant, ...]:
        return self._grants

    def can(
        self, action: Action, resource: ResourceTag, attrs: Mapping[str, object]
    ) -> bool:
        return any(grant.matches(action, resource, attrs) for grant in self._grants)

    def cannot(
        self, action: Action, resource: ResourceTag, attrs: Mapping[str, object]
    ) -> bool:
        return not self.can(action, resource, attrs)

    def __len__(self) -> int:
        return len(self._grants)

    def __repr__(self) -> str:
        return f"Ability({len(self._grants)} grants)"
