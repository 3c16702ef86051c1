"""
Main FastAPI application entry point.

Wires middleware, exception handlers and routers. The authorization policy
is loaded once at startup so a malformed policy file fails fast.

Run:
    uvicorn taskhub.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskhub.core.config import settings
from taskhub.core.container import get_access_policy, get_logger
from taskhub.presentation.routers import system_router
from taskhub.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from taskhub.presentation.routers.api.v1 import v1_router
from taskhub.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan.

    - Startup: load the Casbin policy, log configuration summary
    - Shutdown: log
    """
    logger = get_logger()
    get_access_policy()
    logger.info(
        "application_started",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
        backend=settings.backend,
    )

    yield

    logger.info("application_stopped", app_name=settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Role-based task and employee management API",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Trace-Id"],
)
app.add_middleware(TraceMiddleware)

register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
