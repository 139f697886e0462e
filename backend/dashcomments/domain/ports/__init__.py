"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/     → Data lookup and persistence interfaces
- (root files)      → Other external collaborators (telemetry)
"""
