"""Main FastAPI application entry point."""

import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api import ai, health
from .core import PromptEnhancer, ServiceFallbackDispatcher
from .providers import build_services
from .utils.config import load_config
from .utils.errors import RequestValidationError
from .utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown.

    Loads configuration and builds the enhancer, services and dispatcher
    shared by every request.
    """
    logger.info("Application starting up...")

    try:
        config = load_config()

        enhancer = PromptEnhancer.from_config(config.enhancement)
        services = build_services(config.ordered_services())

        dispatcher = ServiceFallbackDispatcher(
            enhancer=enhancer,
            services=services,
            service_timeout=config.service_timeout_seconds,
            created_by=config.identity.created_by,
        )

    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise

    app.state.config = config
    app.state.enhancer = enhancer
    app.state.dispatcher = dispatcher

    logger.info(
        "Application startup complete",
        extra={"services": dispatcher.service_names}
    )

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    title="Image Relay",
    description="Turns text prompts into third-party image URLs with service fallback",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        f"Rejected request: {exc}",
        extra={"path": request.url.path}
    )
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": str(exc)},
    )


app.include_router(ai.router, prefix="/ai", tags=["ai"])
app.include_router(health.router, prefix="/health", tags=["health"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "image-relay",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
    }


def run():
    import uvicorn

    port = int(os.getenv("PORT", 5000))

    uvicorn.run(
        "image_relay.main:app",
        host="0.0.0.0",
        port=port,
        log_level="info",
    )


if __name__ == "__main__":
    run()
