"""
Basketball Tournament Simulator - FastAPI Application

Main entry point for the web API.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.routes import simulations_router
from .core.config import CORS_ORIGINS


logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

API_NAME = "Basketball Tournament Simulator"

app = FastAPI(
    title=API_NAME,
    description="Group stage and knockout bracket simulation for basketball tournaments.",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(simulations_router, prefix="/api")


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/")
async def root():
    """API name, version and where to find the docs."""
    return {
        "name": f"{API_NAME} API",
        "version": __version__,
        "docs": app.docs_url,
        "health": "/api/health"
    }
