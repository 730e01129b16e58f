import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from .core.config import settings
from .core.logging_setup import setup_logging
from .db.session import init_db
from .api.v1 import health, tasks

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    init_db()
    logger.info("%s ready (db=%s)", settings.APP_NAME, settings.DATABASE_URL)
    yield

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.include_router(health.router, prefix=settings.API_V1_PREFIX)
app.include_router(tasks.router,  prefix=settings.API_V1_PREFIX)
