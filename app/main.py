# app/main.py (async version)

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from contextlib import asynccontextmanager

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.database import create_tables

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.
    """
    # Startup
    logger.info("Application starting up...")

    # Create database tables if they don't exist
    await create_tables()

    yield

    # Shutdown
    logger.info("Application shutting down...")


# Create FastAPI instance
app = FastAPI(
    title="Clientes",
    description="Cadastro de clientes - FastAPI Hexagonal Async",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
    # API docs are only published when enabled
    openapi_url="/openapi.json" if settings.SCHEMA_VISIBILITY else None,
)

# Middlewares (the last one added is the outermost)
from app.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
)

app.add_middleware(AsyncExceptionMiddleware)
app.add_middleware(AsyncRequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
from app.adapters.inbound.api.v1.router import api_router as api_v1_router

app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def redirect_to_docs():
    return RedirectResponse(url="/docs")


@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok", "message": "Cadastro de clientes em funcionamento"}

