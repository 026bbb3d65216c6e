"""User account database queries"""
import logging
from typing import Optional

from skill_garden.db.connection import db
from skill_garden.models.user import User

logger = logging.getLogger(__name__)

USER_COLUMNS = """
    id, name, email, password_hash, skills, interests,
    xp, level, badges, streak, last_active_at, created_at, updated_at
"""


async def create_user(
    name: str,
    email: str,
    password_hash: str,
    skills: Optional[list[str]] = None,
    interests: Optional[list[str]] = None
) -> Optional[User]:
    """
    Insert a new user with fresh progress (xp=0, level=1, streak=0).

    Returns None if the email is already taken.
    """
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"""
                INSERT INTO users (name, email, password_hash, skills, interests)
                VALUES (%s, %s, %s, %s, %s)
                ON CONFLICT (email) DO NOTHING
                RETURNING {USER_COLUMNS}
                """,
                (name, email, password_hash, skills or [], interests or [])
            )
            row = await cur.fetchone()
            await conn.commit()

    if not row:
        logger.info(f"Email already registered: {email}")
        return None

    logger.info(f"Created user {row['id']}")
    return User.from_row(row)


async def get_user_by_id(user_id: int) -> Optional[User]:
    """Fetch a user by primary key"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"SELECT {USER_COLUMNS} FROM users WHERE id = %s",
                (user_id,)
            )
            row = await cur.fetchone()
            return User.from_row(row) if row else None


async def get_user_by_email(email: str) -> Optional[User]:
    """Fetch a user by (lowercased) email"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"SELECT {USER_COLUMNS} FROM users WHERE email = %s",
                (email,)
            )
            row = await cur.fetchone()
            return User.from_row(row) if row else None


async def count_users() -> int:
    """Total number of registered users"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute("SELECT COUNT(*) AS total FROM users")
            row = await cur.fetchone()
            return row["total"] if row else 0
