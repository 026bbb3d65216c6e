"""
UserService - Account Business Logic

Handles registration, login and token authentication.
"""

import logging
from typing import Optional, Tuple

import psycopg

from skill_garden.config import Settings
from skill_garden.db import queries
from skill_garden.exceptions import (
    AuthenticationError,
    ConflictError,
    RecordNotFoundError,
    wrap_external_exception,
)
from skill_garden.gamification import calculate_level_from_xp
from skill_garden.models.user import User
from skill_garden.utils.auth import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user accounts.

    Responsibilities:
    - Registration with hashed passwords
    - Credential checks and token issuing
    - Resolving bearer tokens to users
    - Reading a user's progress summary
    """

    def __init__(self, db_connection, settings: Settings):
        """
        Initialize UserService.

        Args:
            db_connection: Database connection instance
            settings: Application settings (token secret and expiry)
        """
        self.db = db_connection
        self.settings = settings
        logger.debug("UserService initialized")

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        skills: Optional[list[str]] = None,
        interests: Optional[list[str]] = None
    ) -> Tuple[User, str]:
        """
        Create an account with fresh progress and return it with a token.

        Raises:
            ConflictError: email already in use
        """
        email = email.strip().lower()
        try:
            user = await queries.create_user(
                name=name.strip(),
                email=email,
                password_hash=hash_password(password),
                skills=skills,
                interests=interests,
            )
        except psycopg.Error as e:
            raise wrap_external_exception(e, operation="register")

        if user is None:
            raise ConflictError(f"Email already registered: {email}", user_message="Email already in use")

        logger.info(f"Registered user {user.id}")
        return user, create_access_token(user.id, self.settings)

    async def login(self, email: str, password: str) -> Tuple[User, str]:
        """
        Check credentials and issue a token.

        Raises:
            AuthenticationError: unknown email or wrong password
        """
        email = email.strip().lower()
        try:
            user = await queries.get_user_by_email(email)
        except psycopg.Error as e:
            raise wrap_external_exception(e, operation="login")

        if user is None or not verify_password(password, user.password_hash):
            raise AuthenticationError(
                f"Failed login for {email}",
                user_message="Invalid credentials"
            )

        logger.info(f"User {user.id} logged in")
        return user, create_access_token(user.id, self.settings)

    async def authenticate_token(self, token: str) -> User:
        """
        Resolve a bearer token to its user.

        Raises:
            AuthenticationError: bad token or the user no longer exists
        """
        user_id = decode_access_token(token, self.settings)
        user = await queries.get_user_by_id(user_id)
        if user is None:
            raise AuthenticationError(
                f"Token for unknown user {user_id}",
                user_message="User not found for token"
            )
        return user

    async def get_progress_summary(self, user_id: int) -> dict:
        """
        Progress with level recomputed from xp.

        Raises:
            RecordNotFoundError: user doesn't exist
        """
        progress = await queries.get_user_progress(user_id)
        if progress is None:
            raise RecordNotFoundError(
                f"User {user_id} not found",
                record_type="User",
                record_id=user_id
            )

        level_info = calculate_level_from_xp(progress.xp)
        return {
            "xp": progress.xp,
            "level": level_info["current_level"],
            "xp_to_next_level": level_info["xp_to_next_level"],
            "badges": sorted(progress.badges),
            "streak": progress.streak,
            "last_active_at": progress.last_active_at.isoformat() if progress.last_active_at else None,
        }
