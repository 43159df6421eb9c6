import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from comment_client.core.config import settings
from comment_client.containers import Container
from comment_client.routers import actions_v1_router


# Logging configuration
logger = logging.getLogger(__name__)
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Initialize resources on startup and cleanup on shutdown
    """
    # Initialize container
    container = Container()
    app.container = container

    config = container.config()
    logger.info(f"Sentiment service at {config.API_URL}")

    animator = container.animator()
    if config.TYPEWRITER_ENABLED:
        animator.start()

    yield

    # Cleanup on shutdown
    await animator.stop()
    logger.info("Closing HTTP client...")
    await container.http_client().aclose()


# Initialize the FastAPI application
app = FastAPI(lifespan=lifespan)

# Add middlewares
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(actions_v1_router)
