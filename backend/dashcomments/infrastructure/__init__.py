"""
Infrastructure Layer - Implementations of domain ports.

- persistence/  → Prisma repositories
- telemetry/    → Comment event observers
"""
