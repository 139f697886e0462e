"""
SpaceSummary reference - The access-control container owning dashboards.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SpaceSummary:
    space_uuid: str
    project_uuid: str
    organization_uuid: str
    is_private: bool = False
    access: frozenset[str] = field(default_factory=frozenset)  # user uuids
