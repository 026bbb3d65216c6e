"""Challenge database queries"""
import logging
from datetime import date
from typing import Optional

from skill_garden.db.connection import db
from skill_garden.models.challenge import Challenge

logger = logging.getLogger(__name__)

CHALLENGE_COLUMNS = "id, title, type, description, difficulty, reward_xp, scheduled_for, created_at"


async def create_challenge(
    title: str,
    type: str = "Other",
    description: str = "",
    difficulty: str = "Medium",
    reward_xp: int = 100,
    scheduled_for: Optional[date] = None
) -> Challenge:
    """Insert a challenge"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"""
                INSERT INTO challenges (title, type, description, difficulty, reward_xp, scheduled_for)
                VALUES (%s, %s, %s, %s, %s, %s)
                RETURNING {CHALLENGE_COLUMNS}
                """,
                (title, type, description, difficulty, reward_xp, scheduled_for)
            )
            row = await cur.fetchone()
            await conn.commit()
            return Challenge(**row)


async def list_challenges(challenge_type: Optional[str] = None) -> list[Challenge]:
    """List challenges, optionally filtered by type"""
    query = f"SELECT {CHALLENGE_COLUMNS} FROM challenges"
    params: tuple = ()
    if challenge_type:
        query += " WHERE type = %s"
        params = (challenge_type,)
    query += " ORDER BY id"

    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(query, params)
            rows = await cur.fetchall()
            return [Challenge(**row) for row in rows]


async def get_challenge(challenge_id: int) -> Optional[Challenge]:
    """Fetch one challenge"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"SELECT {CHALLENGE_COLUMNS} FROM challenges WHERE id = %s",
                (challenge_id,)
            )
            row = await cur.fetchone()
            return Challenge(**row) if row else None


async def get_scheduled_challenge(day: date) -> Optional[Challenge]:
    """Challenge scheduled for the given day, if any"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"""
                SELECT {CHALLENGE_COLUMNS}
                FROM challenges
                WHERE scheduled_for = %s
                ORDER BY id
                LIMIT 1
                """,
                (day,)
            )
            row = await cur.fetchone()
            return Challenge(**row) if row else None


async def get_random_challenge() -> Optional[Challenge]:
    """Any challenge, picked at random"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"SELECT {CHALLENGE_COLUMNS} FROM challenges ORDER BY random() LIMIT 1"
            )
            row = await cur.fetchone()
            return Challenge(**row) if row else None
