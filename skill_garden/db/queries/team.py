"""Team database queries"""
import logging
from typing import Optional

from skill_garden.db.connection import db
from skill_garden.models.team import Team, TeamMember, TeamStatus, status_for_needs

logger = logging.getLogger(__name__)

TEAM_COLUMNS = "id, name, description, tags, needs, status, created_at, updated_at"


def _team_from_row(row: dict, members: list[int]) -> Team:
    return Team(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        tags=row["tags"] or [],
        needs=row["needs"],
        status=row["status"],
        members=members,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


async def create_team(
    creator_id: int,
    name: str,
    description: str = "",
    tags: Optional[list[str]] = None,
    needs: int = 0
) -> Team:
    """Create a team with its creator as the first member"""
    status = status_for_needs(needs)

    async with db.transaction() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"""
                INSERT INTO teams (name, description, tags, needs, status)
                VALUES (%s, %s, %s, %s, %s)
                RETURNING {TEAM_COLUMNS}
                """,
                (name, description, tags or [], needs, status.value)
            )
            row = await cur.fetchone()
            await cur.execute(
                "INSERT INTO team_members (team_id, user_id) VALUES (%s, %s)",
                (row["id"], creator_id)
            )

    logger.info(f"User {creator_id} created team {row['id']} ({name})")
    return _team_from_row(row, [creator_id])


async def list_teams(status: Optional[str] = None) -> list[Team]:
    """List teams, optionally filtered by status"""
    query = f"""
        SELECT {TEAM_COLUMNS},
               COALESCE(
                   ARRAY(SELECT user_id FROM team_members tm WHERE tm.team_id = t.id ORDER BY joined_at),
                   '{{}}'
               ) AS member_ids
        FROM teams t
    """
    params: tuple = ()
    if status:
        query += " WHERE status = %s"
        params = (status,)
    query += " ORDER BY created_at DESC"

    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(query, params)
            rows = await cur.fetchall()
            return [_team_from_row(row, row["member_ids"]) for row in rows]


async def get_team_with_members(team_id: int) -> Optional[tuple[Team, list[TeamMember]]]:
    """Fetch a team together with its members' public info"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"SELECT {TEAM_COLUMNS} FROM teams WHERE id = %s",
                (team_id,)
            )
            row = await cur.fetchone()
            if not row:
                return None

            await cur.execute(
                """
                SELECT u.id, u.name, u.xp, u.level, u.skills
                FROM team_members tm
                JOIN users u ON u.id = tm.user_id
                WHERE tm.team_id = %s
                ORDER BY tm.joined_at
                """,
                (team_id,)
            )
            member_rows = await cur.fetchall()

    members = [TeamMember(**member) for member in member_rows]
    return _team_from_row(row, [m.id for m in members]), members


async def join_team(team_id: int, user_id: int) -> tuple[Optional[Team], bool]:
    """
    Add a user to a team.

    The team row is locked so concurrent joins update `needs` one at a time.

    Returns:
        (team, joined). team is None when it doesn't exist; joined is False
        when the user was already a member.
    """
    async with db.transaction() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"SELECT {TEAM_COLUMNS} FROM teams WHERE id = %s FOR UPDATE",
                (team_id,)
            )
            row = await cur.fetchone()
            if not row:
                return None, False

            await cur.execute(
                "SELECT user_id FROM team_members WHERE team_id = %s ORDER BY joined_at",
                (team_id,)
            )
            members = [r["user_id"] for r in await cur.fetchall()]
            if user_id in members:
                return _team_from_row(row, members), False

            await cur.execute(
                "INSERT INTO team_members (team_id, user_id) VALUES (%s, %s)",
                (team_id, user_id)
            )

            needs = row["needs"]
            if needs > 0:
                needs -= 1
            status = TeamStatus.OPEN.value if needs <= 0 else row["status"]

            await cur.execute(
                f"""
                UPDATE teams
                SET needs = %s, status = %s, updated_at = CURRENT_TIMESTAMP
                WHERE id = %s
                RETURNING {TEAM_COLUMNS}
                """,
                (needs, status, team_id)
            )
            row = await cur.fetchone()

    logger.info(f"User {user_id} joined team {team_id}")
    return _team_from_row(row, members + [user_id]), True
