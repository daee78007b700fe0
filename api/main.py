"""
FastAPI application initialization and configuration.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from database.engine import init_db, close_db
from api.routes import health, resumes, contact
from api.routes.v1 import jobs, recruiters

from core.middleware import (
    ErrorHandlingMiddleware,
    setup_error_handlers,
    StructuredLoggingMiddleware,
    setup_logging,
)

# Setup structured logging (do this first, before anything else)
setup_logging(
    log_level=settings.log_level,
    json_logs=settings.json_logs,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    logger.info(f"Starting {settings.app_name} in {settings.app_env} environment")
    await init_db()

    yield

    logger.info(f"Shutting down {settings.app_name}")
    await close_db()


app = FastAPI(
    title=settings.app_name,
    description="Job board with candidate intake, resume parsing and recruiter contact",
    version="0.1.0",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

# Setup error handlers (before middleware)
setup_error_handlers(app)

# Middleware executes in reverse order of registration
# 1. CORS (innermost)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 2. Structured logging middleware (logs all requests/responses)
app.add_middleware(
    StructuredLoggingMiddleware,
    log_request_body=settings.log_request_body,
    log_response_body=settings.log_response_body,
    max_body_size=settings.log_max_body_size,
)

# 3. Error handling middleware (outermost - catches all errors)
app.add_middleware(
    ErrorHandlingMiddleware,
    debug=settings.debug,
)

# Health check routes
app.include_router(health.router, tags=["Health"])

# Form endpoints called by the job board front end
app.include_router(resumes.router)
app.include_router(contact.router)

# API v1 routes
app.include_router(
    jobs.router,
    prefix=f"{settings.api_v1_prefix}/jobs",
    tags=["Jobs"],
)
app.include_router(
    recruiters.router,
    prefix=f"{settings.api_v1_prefix}/recruiters",
    tags=["Recruiters"],
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
