"""
Dashboard reference - Where a dashboard lives (space, project, organization).
"""

from dataclasses import dataclass

from dashcomments.domain.value_objects.dashboard_uuid import DashboardUuid


@dataclass(frozen=True)
class Dashboard:
    dashboard_uuid: DashboardUuid
    space_uuid: str
    project_uuid: str
    organization_uuid: str

    def subject_attrs(self) -> dict[str, str]:
        """Attributes used when checking capabilities on this dashboard."""
        return {
            "organizationUuid": self.organization_uuid,
            "projectUuid": self.project_uuid,
        }
