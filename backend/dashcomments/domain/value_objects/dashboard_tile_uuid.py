"""
DashboardTileUuid Value Object - UUID of the tile a comment is attached to.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class DashboardTileUuid:
    value: str

    def __post_init__(self):
        try:
            UUID(self.value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid dashboard tile ID (UUID): {self.value}") from None

    def __str__(self) -> str:
        return self.value
