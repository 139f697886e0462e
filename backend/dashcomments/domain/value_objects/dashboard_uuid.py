"""
DashboardUuid Value Object - UUID wrapper for dashboard identity.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class DashboardUuid:
    value: str

    def __post_init__(self):
        if not self._is_valid_uuid(self.value):
            raise ValueError(f"Invalid dashboard ID (UUID): {self.value}")

    def _is_valid_uuid(self, value: str) -> bool:
        """Check if string is a valid UUID."""
        try:
            UUID(value)
            return True
        except (TypeError, ValueError):
            return False

    def __str__(self) -> str:
        return self.value
