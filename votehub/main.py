"""FastAPI application factory and app configuration for VoteHub.

This module creates the FastAPI `app`, configures middleware (CORS, rate limiting),
registers routers under `votehub.routers.*` and initializes the DB on startup
(calls `votehub.database.init_db`).
"""

from __future__ import annotations

import importlib
import logging
import os
import warnings
from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from votehub.database import init_db
from votehub.errors import make_error_payload, make_validation_error_response

logger = logging.getLogger(__name__)
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

# argon2 cffi exposes a deprecated attribute access that creates a lot of noise
warnings.filterwarnings("ignore", message=r"Accessing argon2.__version__ is deprecated")


DEFAULT_RATE_LIMIT = os.getenv("RATE_LIMIT", "10/minute")
limiter = Limiter(key_func=get_remote_address, default_limits=[DEFAULT_RATE_LIMIT])


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Lifespan startup: initializing database")
    init_db()
    yield
    logger.info("Lifespan shutdown")

app = FastAPI(title="VoteHub Backend", version="1.0.0", lifespan=lifespan)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# CORS (developer friendly defaults)
origins = os.getenv("CORS_ORIGINS", "*")
if origins == "*":
    allowed_origins: List[str] = ["*"]
else:
    # comma separated list
    allowed_origins = [o.strip() for o in origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(status_code=429, content=make_error_payload("rate_limited", "Rate limit exceeded"))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=422, content=make_validation_error_response(exc.errors()))


@app.get("/api/health", tags=["Health"])
async def health() -> dict:
    return {"status": "ok"}


def _include_router(module_name: str) -> None:
    module = importlib.import_module(module_name)
    app.include_router(module.router)
    logger.info("Included router: %s", module_name)


for r in ("system", "voting"):
    _include_router(f"votehub.routers.{r}")


__all__ = ["app"]
