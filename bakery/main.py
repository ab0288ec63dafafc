"""FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bakery.config import get_settings
from bakery.api import recipes
from bakery.schemas.recipe import ErrorResponse
from bakery.services.exceptions import BakeryServiceError

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Bakery Production API",
    description="Recipe feasibility and costing for bakery operations",
    version="0.1.0",
)

# CORS configuration from environment
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(recipes.router, prefix="/api/v1")


@app.exception_handler(BakeryServiceError)
async def bakery_service_error_handler(request: Request, exc: BakeryServiceError):
    """Render service errors as {success: false, error: ...}.

    DataUnavailable is logged with its cause where it is raised.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )


@app.get("/health")
async def health_check():
    """Health check endpoint for Cloud Run."""
    return {"status": "healthy"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Bakery Production API", "docs": "/docs"}
