"""
Seed the database with demo users, teams, challenges and resources.

Development only. Usage:
    python -m skill_garden.scripts.seed [--force]
"""
import argparse
import asyncio
import logging
from datetime import datetime, timezone

from skill_garden.config import Settings, get_settings
from skill_garden.db import queries
from skill_garden.db.connection import db
from skill_garden.db.schema import init_schema, truncate_all_tables
from skill_garden.exceptions import AuthorizationError, ValidationError
from skill_garden.utils.auth import create_access_token, hash_password

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {"name": "Ava Green", "email": "ava@example.com", "password": "password1",
     "skills": ["HTML", "CSS", "JS"], "interests": ["Frontend"]},
    {"name": "Diego Park", "email": "diego@example.com", "password": "secret123",
     "skills": ["Debugging", "Node"], "interests": ["Backend"]},
    {"name": "Lina Shen", "email": "lina@example.com", "password": "hunter2",
     "skills": ["Algorithms", "DSA"], "interests": ["DSA"]},
]


async def seed_database(settings: Settings, force: bool = False) -> dict:
    """
    Replace all data with the demo set.

    Raises:
        AuthorizationError: running in production
        ValidationError: users exist and force is False
    """
    if settings.is_production:
        raise AuthorizationError("Seeding attempted in production", resource="seeding")

    if await queries.count_users() > 0 and not force:
        raise ValidationError(
            "Refusing to seed a non-empty database",
            user_message="Database already contains users. Use ?force=1 to reseed."
        )

    await truncate_all_tables()

    seeded_users = []
    for demo in DEMO_USERS:
        user = await queries.create_user(
            name=demo["name"],
            email=demo["email"],
            password_hash=hash_password(demo["password"]),
            skills=demo["skills"],
            interests=demo["interests"],
        )
        seeded_users.append({
            "id": user.id,
            "email": user.email,
            "password": demo["password"],
            "token": create_access_token(user.id, settings),
        })

    await queries.create_team(
        creator_id=seeded_users[0]["id"],
        name="Frontend Sprouts",
        description="A small frontend team",
        tags=["HTML", "CSS"],
        needs=2,
    )
    await queries.create_team(
        creator_id=seeded_users[1]["id"],
        name="Bug Busters",
        description="Focused on finding and fixing bugs",
        tags=["Debugging", "JS"],
        needs=1,
    )

    await queries.create_challenge(
        title="Optimize Sorting Routine",
        type="Speed Run",
        description="Optimize a slow sorting routine for large inputs.",
        difficulty="Hard",
        reward_xp=200,
        scheduled_for=datetime.now(timezone.utc).date(),
    )
    await queries.create_challenge(
        title="Fix Unit Tests",
        type="Bug Hunt",
        description="Identify failing tests and fix them.",
        difficulty="Medium",
        reward_xp=120,
    )
    await queries.create_challenge(
        title="Tiny Algorithms",
        type="Speed Run",
        description="Solve small algorithmic tasks.",
        difficulty="Medium",
        reward_xp=100,
    )

    await queries.create_resource(
        title="JS Event Loop Cheat Sheet",
        description="Concise notes on the event loop.",
        category="notes",
        tags=["JS"],
    )
    await queries.create_resource(
        title="Clean Code",
        description="A handbook of agile software craftsmanship",
        category="books",
        author="Robert C. Martin",
        tags=["Best Practices"],
    )
    await queries.create_resource(
        title="Mechanical Keyboard Guide",
        description="Choosing switches for comfort",
        category="equipment",
        tags=["Hardware"],
    )

    logger.info(f"Seed complete: {len(seeded_users)} users")
    return {"success": True, "message": "Seed complete", "users": seeded_users}


async def main(force: bool) -> None:
    settings = get_settings()
    await db.init_pool(settings.database_url)
    try:
        await init_schema()
        result = await seed_database(settings, force=force)
        for user in result["users"]:
            print(f"{user['email']} / {user['password']}")
    finally:
        await db.close_pool()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed Skill Garden demo data")
    parser.add_argument("--force", action="store_true", help="Reseed even if users exist")
    args = parser.parse_args()

    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=logging.INFO
    )
    asyncio.run(main(args.force))
