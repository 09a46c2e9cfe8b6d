"""
FastAPI Application
==================
Main entry point for the Content Preview API.

Run with:
    uvicorn portfolio_content.web_api.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_content import __version__
from portfolio_content.config import settings
from portfolio_content.logging_setup import setup_logging
from portfolio_content.web_api.routers import content, health


@asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    yield


# Create application
app = FastAPI(
    title="Portfolio Content API",
    description="Preview of the WordPress content behind the portfolio site",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(content.router, prefix="/content", tags=["Content"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Portfolio Content API",
        "version": __version__,
        "source": settings.WP_API_URL,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m portfolio_content.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
