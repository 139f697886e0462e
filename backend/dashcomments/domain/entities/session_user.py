"""
SessionUser - The acting identity for one call. Never persisted.
"""

from dataclasses import dataclass
from typing import Optional

from dashcomments.domain.authorization.ability import Ability
from dashcomments.domain.value_objects.organization_uuid import OrganizationUuid
from dashcomments.domain.value_objects.user_uuid import UserUuid


@dataclass
class SessionUser:
    user_uuid: UserUuid
    organization_uuid: OrganizationUuid
    ability: Ability
    name: Optional[str] = None

    def __post_init__(self):
        if not self.user_uuid or not self.organization_uuid:
            raise ValueError("SessionUser must have both user and organization defined.")
