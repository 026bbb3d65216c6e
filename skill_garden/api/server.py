"""FastAPI application setup"""
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from skill_garden import __version__
from skill_garden.api import debug_routes, metrics_routes
from skill_garden.api.middleware import setup_cors, setup_rate_limiting
from skill_garden.api.routes import router
from skill_garden.config import Settings, get_settings
from skill_garden.db.connection import db
from skill_garden.db.schema import init_schema
from skill_garden.exceptions import SkillGardenError
from skill_garden.gamification.judge import AcceptanceJudge, create_judge
from skill_garden.observability.metrics_middleware import setup_metrics_middleware
from skill_garden.observability.sentry_config import init_sentry
from skill_garden.services.container import ServiceContainer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for FastAPI application"""
    container: ServiceContainer = app.state.container

    # Startup
    logger.info("Starting API server...")
    await container.db.init_pool(container.settings.database_url)
    logger.info("Database pool initialized")
    await init_schema()

    yield

    # Shutdown
    logger.info("Shutting down API server...")
    await container.db.close_pool()
    logger.info("Database pool closed")


def create_api_application(
    settings: Optional[Settings] = None,
    judge: Optional[AcceptanceJudge] = None
) -> FastAPI:
    """
    Create and configure FastAPI application

    Args:
        settings: Defaults to environment-loaded settings
        judge: Submission acceptance judge, defaults to the keyword/coin-flip judge

    Services and query modules share the global `db` pool, which the
    lifespan opens and closes.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, settings.log_level)
    )

    init_sentry(settings)

    app = FastAPI(
        title="Skill Garden API",
        description="Gamified skill progression: challenges, teams, XP and streaks",
        version=__version__,
        lifespan=lifespan
    )
    app.state.container = ServiceContainer(
        db=db,
        settings=settings,
        judge=judge or create_judge(settings),
    )

    # Setup middleware
    setup_cors(app, settings)
    setup_rate_limiting(app, settings)
    setup_metrics_middleware(app, enabled=settings.enable_metrics)

    # Include routes
    app.include_router(router)
    if settings.enable_metrics:
        app.include_router(metrics_routes.router)
    if not settings.is_production:
        app.include_router(debug_routes.router)

    @app.exception_handler(SkillGardenError)
    async def skill_garden_error_handler(request: Request, exc: SkillGardenError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"] if part != "body"),
                "message": err["msg"],
            }
            for err in exc.errors()
        ]
        logger.warning(f"Validation failed on {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Validation failed", "errors": errors}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content={
                    "success": False,
                    "message": "Endpoint not found",
                    "request": {"method": request.method, "path": request.url.path},
                }
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.detail}
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Internal server error"}
        )

    logger.info("FastAPI application created")

    return app
