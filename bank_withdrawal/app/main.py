import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.routes import router as bank_router
from .core.config import get_settings
from .core.db import init_db
from .services import build_notifier

settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    # One notifier (and SNS client) for the life of the process.
    app.state.notifier = build_notifier(settings)
    logger.info("app.started", extra={"notifier": type(app.state.notifier).__name__})
    yield

app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.include_router(bank_router)

@app.get("/health")
def read_health() -> dict[str, str]:
    return {"status": "ok"}
