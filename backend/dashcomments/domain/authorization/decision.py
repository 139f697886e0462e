"""
AccessDecision - Outcome of a visibility check.

INDETERMINATE means the check could not be carried out (for example the
space lookup failed). Callers treat it as DENIED.
"""

from enum import Enum


class AccessDecision(str, Enum):
    ALLOWED = "allowed"
    DENIED = "denied"
    INDETERMINATE = "indeterminate"

    @property
    def is_allowed(self) -> bool:
        return self is AccessDecision.ALLOWED
