"""
DOMAIN LAYER - Dashboard comment rules

This layer contains:
- Entities: Comment, Dashboard, SpaceSummary, SessionUser
- Value Objects: Immutable identifiers (UserUuid, DashboardUuid, CommentId)
- Authorization: Actions, resource tags, abilities, space visibility
- Services: Pure domain logic (thread grouping)
- Ports: Interfaces that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
