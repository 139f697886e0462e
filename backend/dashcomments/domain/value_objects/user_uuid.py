"""
UserUuid Value Object
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserUuid:
    value: str  # user_uuid

    def __post_init__(self):
        if not self.value:
            raise ValueError("UserUuid cannot be empty")

        UUID(self.value)  # Validate UUID format

    def __str__(self) -> str:
        return self.value
