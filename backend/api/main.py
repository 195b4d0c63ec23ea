"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import health, token
from common.config import APP_VERSION, settings
from issuer.errors import ConfigurationError

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Twilio Video access token server",
    version=APP_VERSION,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Report a malformed deployment with the same error body shape."""
    logger.error(f"Configuration error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": {"message": "configuration error", "explanation": str(exc)}},
    )


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(token.router, tags=["Token"])
