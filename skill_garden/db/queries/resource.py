"""Resource board database queries"""
import logging
from typing import Optional

from skill_garden.db.connection import db
from skill_garden.models.resource import Resource

logger = logging.getLogger(__name__)

RESOURCE_COLUMNS = "id, title, description, category, author, tags, link, created_at"


async def create_resource(
    title: str,
    category: str,
    description: str = "",
    author: Optional[str] = None,
    tags: Optional[list[str]] = None,
    link: Optional[str] = None
) -> Resource:
    """Insert resource metadata"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"""
                INSERT INTO resources (title, description, category, author, tags, link)
                VALUES (%s, %s, %s, %s, %s, %s)
                RETURNING {RESOURCE_COLUMNS}
                """,
                (title, description, category, author, tags or [], link or "#")
            )
            row = await cur.fetchone()
            await conn.commit()

    logger.info(f"Created resource {row['id']} in {category}")
    return Resource(**row)


async def list_resources(category: Optional[str] = None) -> list[Resource]:
    """List resources, optionally filtered by category"""
    query = f"SELECT {RESOURCE_COLUMNS} FROM resources"
    params: tuple = ()
    if category:
        query += " WHERE category = %s"
        params = (category,)
    query += " ORDER BY created_at DESC"

    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(query, params)
            rows = await cur.fetchall()
            return [Resource(**row) for row in rows]
