"""
Closed vocabulary of actions and resource types.
"""

from enum import Enum


class Action(str, Enum):
    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    # Wildcard: a manage grant satisfies every action
    MANAGE = "manage"


class ResourceTag(str, Enum):
    DASHBOARD_COMMENTS = "DashboardComments"
    SPACE = "Space"
    DASHBOARD = "Dashboard"
    PROJECT = "Project"
