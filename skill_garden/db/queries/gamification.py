"""Gamification database queries"""
import logging
from typing import Optional, Tuple

import psycopg

from skill_garden.db.connection import db
from skill_garden.exceptions import ConcurrentUpdateError
from skill_garden.models.progress import UserProgress

logger = logging.getLogger(__name__)


def _progress_from_row(row: dict) -> UserProgress:
    return UserProgress(
        xp=row["xp"],
        level=row["level"],
        badges=set(row["badges"] or []),
        streak=row["streak"],
        last_active_at=row["last_active_at"],
    )


# ==========================================
# Progress
# ==========================================

async def get_user_progress(user_id: int) -> Optional[UserProgress]:
    """Read a user's progress without locking"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                """
                SELECT xp, level, badges, streak, last_active_at
                FROM users
                WHERE id = %s
                """,
                (user_id,)
            )
            row = await cur.fetchone()
            return _progress_from_row(row) if row else None


async def lock_user_progress(
    conn: psycopg.AsyncConnection,
    user_id: int
) -> Optional[Tuple[UserProgress, int]]:
    """
    Load progress and its version with a row lock.

    Must run inside db.transaction(); the lock is held until commit so
    concurrent submissions by the same user are applied one after another.

    Returns:
        (progress, version) or None if the user doesn't exist
    """
    async with conn.cursor() as cur:
        await cur.execute(
            """
            SELECT xp, level, badges, streak, last_active_at, version
            FROM users
            WHERE id = %s
            FOR UPDATE
            """,
            (user_id,)
        )
        row = await cur.fetchone()

    if not row:
        return None
    return _progress_from_row(row), row["version"]


async def save_user_progress(
    conn: psycopg.AsyncConnection,
    user_id: int,
    progress: UserProgress,
    expected_version: int
) -> int:
    """
    Write progress back if the row still has `expected_version`.

    Returns:
        The new version

    Raises:
        ConcurrentUpdateError: the row was modified since it was read
    """
    async with conn.cursor() as cur:
        await cur.execute(
            """
            UPDATE users
            SET xp = %s,
                level = %s,
                badges = %s,
                streak = %s,
                last_active_at = %s,
                version = version + 1,
                updated_at = CURRENT_TIMESTAMP
            WHERE id = %s AND version = %s
            RETURNING version
            """,
            (
                progress.xp,
                progress.level,
                sorted(progress.badges),
                progress.streak,
                progress.last_active_at,
                user_id,
                expected_version,
            )
        )
        row = await cur.fetchone()

    if not row:
        raise ConcurrentUpdateError(str(user_id), expected_version, operation="save_user_progress")
    return row["version"]


async def add_submission(
    conn: psycopg.AsyncConnection,
    user_id: int,
    challenge_id: int,
    accepted: bool,
    xp_awarded: int
) -> int:
    """Record a challenge submission and return its id"""
    async with conn.cursor() as cur:
        await cur.execute(
            """
            INSERT INTO challenge_submissions (user_id, challenge_id, accepted, xp_awarded)
            VALUES (%s, %s, %s, %s)
            RETURNING id
            """,
            (user_id, challenge_id, accepted, xp_awarded)
        )
        row = await cur.fetchone()
        return row["id"]


# ==========================================
# Leaderboard
# ==========================================

async def get_leaderboard(limit: int = 50) -> list[dict]:
    """Top users by total XP"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                """
                SELECT id, name, xp, level
                FROM users
                ORDER BY xp DESC, id ASC
                LIMIT %s
                """,
                (limit,)
            )
            rows = await cur.fetchall()
            return [dict(row) for row in rows]
