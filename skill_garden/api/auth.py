"""API authentication using bearer tokens"""
import logging
from typing import Optional
from fastapi import Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from skill_garden.exceptions import AuthenticationError
from skill_garden.models.user import User
from skill_garden.services.container import ServiceContainer

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_container(request: Request) -> ServiceContainer:
    """Service container attached to the running application"""
    return request.app.state.container


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> User:
    """
    Resolve the Authorization header to a user

    Raises:
        AuthenticationError: header missing or malformed, token invalid,
            or the user no longer exists
    """
    if credentials is None:
        raise AuthenticationError(
            "Missing or malformed Authorization header",
            user_message="Authorization required"
        )

    user = await get_container(request).user_service.authenticate_token(credentials.credentials)
    logger.debug(f"Authenticated user {user.id}")
    return user
