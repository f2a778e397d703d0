from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging
import os

from app.database import engine
from app.database import Base
import app.models  # noqa — register all models
from app.config import settings
from app.error_handlers import register_error_handlers
from app.routers import health, webhooks

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    # Ensure DB exists and tables are created (for dev mode without alembic)
    if settings.DATABASE_URL.startswith("sqlite:///./data/"):
        os.makedirs("data", exist_ok=True)
    Base.metadata.create_all(bind=engine)
    logger.info("Campus Presence spuštěn (prostředí=%s)", settings.APP_ENV)

    yield


app = FastAPI(
    title="Campus Presence",
    description="Příjem location webhooků a evidence přítomnosti na kampusu",
    version="1.0.0",
    lifespan=lifespan,
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(webhooks.router)
