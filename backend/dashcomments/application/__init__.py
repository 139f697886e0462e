"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- services/  → CommentService (permission-checked comment operations)
- dto/       → Data Transfer Objects

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities, repositories, external collaborators
"""
