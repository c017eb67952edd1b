"""
SlideLoader - Main Application Entry Point

Serves a remark.js slideshow whose markdown deck is selected with the
``slide`` query-string parameter, e.g. ``/?slide=category-theory`` loads
``slides/category-theory.md``.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from slideloader import __version__
from slideloader.core import get_settings, setup_logging
from slideloader.api.routes import slides
from slideloader.services import get_slide_loader

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown."""
    settings = get_settings()

    # Startup
    logger.info(f"🚀 Starting {settings.app_name}...")
    logger.info(f"📂 Slides directory: \033[93m{settings.slides_dir}\033[0m")
    logger.info(f"🎞️  Default deck: \033[96m{settings.default_slide}\033[0m")
    if settings.slides_available:
        logger.info("✅ Slides directory found")
    else:
        logger.warning("⚠️  Slides directory not found - decks will fail to load")

    yield

    # Shutdown
    logger.info(f"👋 Shutting down {settings.app_name}...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="remark.js slideshow with the deck selected from the URL",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Include API routers
    app.include_router(slides.router, tags=["slides"])

    # Serve the markdown decks next to the page so relative paths resolve
    if settings.slides_available:
        app.mount("/slides", StaticFiles(directory=settings.slides_dir), name="slides")

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        """Serve the slideshow page for the deck selected in the query string."""
        result = get_slide_loader().on_load(request.url.query)
        if not result.ok:
            raise HTTPException(
                status_code=500,
                detail=f"Failed to render slideshow for {result.source_url}: {result.error}",
            )
        return HTMLResponse(result.slideshow.html)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "app_name": settings.app_name,
            "slides_available": settings.slides_available,
        }

    @app.get("/api/config")
    async def get_public_config():
        """Get public configuration."""
        return {
            "app_name": settings.app_name,
            "slide_param": settings.slide_param,
            "default_slide": settings.default_slide,
            "remark_js_url": settings.remark_js_url,
        }

    return app


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "slideloader.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


# Create the application instance
app = create_app()


if __name__ == "__main__":
    run()
