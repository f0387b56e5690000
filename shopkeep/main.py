"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Annotated

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from shopkeep.api.v1 import router as api_router
from shopkeep.core.config import settings
from shopkeep.core.database import get_db
from shopkeep.services.settings import get_setting

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)

DEFAULT_APP_NAME = "Shopkeep API"

app = FastAPI(
    title=DEFAULT_APP_NAME,
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root(db: Annotated[Session, Depends(get_db)]) -> dict[str, str]:
    """Root route; minimal payload for discovery. Name comes from the app_name setting."""
    return {"message": str(get_setting(db, "app_name", DEFAULT_APP_NAME))}
