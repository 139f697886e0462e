"""
Authentication Dependency for FastAPI.

- Extracts and validates JWT token from Authorization header
- Returns the SessionUser (identity + ability) for use in route handlers
- Raises HTTPException 401 if unauthorized

Claims:
- sub:           user uuid
- org:           organization uuid
- org_role:      organization-wide role (optional)
- project_roles: {projectUuid: role} (optional)
- name:          display name (optional)
"""

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from dashcomments.config.settings import Config
from dashcomments.domain.authorization.roles import build_ability
from dashcomments.domain.entities.session_user import SessionUser
from dashcomments.domain.value_objects.organization_uuid import OrganizationUuid
from dashcomments.domain.value_objects.user_uuid import UserUuid


security = HTTPBearer()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> SessionUser:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is invalid, expired, or missing required claims
    """
    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss"]},
        )
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        raise _unauthorized(f"Invalid token: {str(e)}")

    user_uuid = claims.get("sub")
    organization_uuid = claims.get("org")
    if not user_uuid or not organization_uuid:
        raise _unauthorized("Missing required claims in token")

    project_roles = claims.get("project_roles") or {}
    if not isinstance(project_roles, dict):
        raise _unauthorized("Invalid project_roles claim")

    try:
        ability = build_ability(
            organization_uuid=organization_uuid,
            organization_role=claims.get("org_role"),
            project_roles=project_roles,
        )
        return SessionUser(
            user_uuid=UserUuid(user_uuid),
            organization_uuid=OrganizationUuid(organization_uuid),
            ability=ability,
            name=claims.get("name"),
        )
    except ValueError as e:
        raise _unauthorized(f"Invalid token claims: {str(e)}")
