"""Main entry point for the Skill Garden API server"""
import logging

import uvicorn

from skill_garden.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Validate configuration and serve the API"""
    settings = get_settings()

    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, settings.log_level)
    )
    logger.info(f"Starting Skill Garden on port {settings.port} ({settings.environment})")

    uvicorn.run(
        "skill_garden.api.server:create_api_application",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
