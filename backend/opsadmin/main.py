"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings, get_cors_origins
from .database import init_db, close_db
from .routers import (
    devices_router,
    icloud_profiles_router,
    social_accounts_router,
    proxies_router,
    games_router,
    categories_router,
    content_router,
    onboarding_router,
    reports_router,
    refund_requests_router,
    support_tickets_router,
    relationships_router,
    characters_router,
    feature_flags_router,
    me_router,
    users_router,
    profile_router,
)
from .utils.errors import register_exception_handlers

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    logger.info("Starting Ops Admin API")

    await init_db()
    logger.info("Database initialized")

    yield

    await close_db()
    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Ops Admin",
        description="Admin API for devices, game content, onboarding and moderation",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware for the admin console
    origins = get_cors_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Devices area (promoters included)
    app.include_router(devices_router)
    app.include_router(icloud_profiles_router)
    app.include_router(social_accounts_router)
    app.include_router(proxies_router)

    # Staff-only areas
    app.include_router(games_router)
    app.include_router(categories_router)
    app.include_router(content_router)
    app.include_router(onboarding_router)
    app.include_router(reports_router)
    app.include_router(refund_requests_router)
    app.include_router(support_tickets_router)
    app.include_router(relationships_router)
    app.include_router(characters_router)
    app.include_router(feature_flags_router)

    app.include_router(me_router)
    app.include_router(users_router)
    app.include_router(profile_router)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.web_port)
