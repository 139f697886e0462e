"""
OrganizationUuid Value Object - The organization a user acts on behalf of.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class OrganizationUuid:
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("Organization UUID cannot be empty")

        UUID(self.value)

    def __str__(self) -> str:
        return self.value
