"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rsvp import __version__
from rsvp.api.routes import documents, health
from rsvp.config import get_settings
from rsvp.logging_config import setup_logging

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    setup_logging(settings.log_level, json_output=settings.log_json)
    yield


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="RSVP Speed-Reading Application",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(documents.router, prefix="/api/documents", tags=["documents"])


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "service": "RSVP Reader API",
        "version": __version__,
        "docs": "/docs" if settings.debug else None,
    }
