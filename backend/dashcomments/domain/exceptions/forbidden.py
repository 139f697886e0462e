"""
ForbiddenError - Raised when the acting user lacks a capability or cannot
see the space a dashboard belongs to.
Maps to: HTTP 403 Forbidden
"""


class ForbiddenError(Exception):
    """Raised when user lacks permission to act on a resource"""

    def __init__(self, message: str = "You don't have access to this resource"):
        super().__init__(message)
        self.message = message
