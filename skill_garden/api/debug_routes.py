"""Development-only API routes (mounted outside production)"""
import logging
from fastapi import APIRouter, Depends

from skill_garden.api.auth import get_container
from skill_garden.scripts.seed import seed_database
from skill_garden.services.container import ServiceContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/debug")


@router.post("/seed")
async def seed(
    force: str = "",
    container: ServiceContainer = Depends(get_container)
):
    """Reset the database to demo data (?force=1 to overwrite existing users)"""
    return await seed_database(container.settings, force=force in ("1", "true"))
