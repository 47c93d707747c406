"""
FastAPI application entry point for the Payload Guard demo API.

This module creates the FastAPI app instance, installs the payload validation
error handler and registers all routers.
"""

import logging

from fastapi import FastAPI

from payload_guard.config import settings
from payload_guard.dependencies import register_exception_handlers
from payload_guard.routes.health import router as health_router
from payload_guard.routes.users import router as users_router

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    description="Strict request payload validation service",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Map payload validation errors to 400/422 JSON responses
register_exception_handlers(app)

# Register routers
app.include_router(health_router)
app.include_router(users_router)

logger.info(f"FastAPI app initialized ({settings.ENVIRONMENT})")
