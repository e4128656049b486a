"""
FastAPI application entry point.
"""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.routers import health, predict
from app.services.dispatch_service import dispatch_service
from app.middleware.error_handler import ErrorHandlerMiddleware, add_request_id

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Startup: Load router and expert models
    - Shutdown: Release the dispatcher
    """
    logger.info("Starting MSNet Inference Service")

    # Model loading is CPU/IO bound and can block the event loop
    loop = asyncio.get_running_loop()
    success = await loop.run_in_executor(None, dispatch_service.initialize)

    if success:
        stats = dispatch_service.get_system_stats()
        logger.info(
            "Inference service ready: %d experts, top_k=%d",
            stats.get("num_experts", 0), stats.get("top_k", 0),
        )
    else:
        logger.warning(
            "Failed to initialize dispatcher; prediction endpoints will be unavailable"
        )

    yield  # Application runs here

    logger.info("Shutting down MSNet Inference Service ...")
    dispatch_service.shutdown()


# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description=settings.api_description,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add error handling middleware
app.add_middleware(ErrorHandlerMiddleware)

# Add request ID middleware
app.middleware("http")(add_request_id)

# Include routers
app.include_router(health.router)
app.include_router(predict.router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "docs": "/docs",
        "health": "/api/v1/health",
        "predict": "/api/v1/predict",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
