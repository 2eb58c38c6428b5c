"""
FastAPI application entry point for the Movies API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movies_api.api.config import (
    get_api_host, get_api_port, get_log_file, get_log_level, get_seed_on_startup,
)
from movies_api.api.dependencies import get_database_manager
from movies_api.api.routers import movies, system
from movies_api.database.init_db import init_database
from movies_api.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables, and seed fixture data into an empty database when enabled."""
    setup_logging(log_file=get_log_file(), level=get_log_level())
    init_database(db_manager=get_database_manager(), seed=get_seed_on_startup())
    logger.info("Movies API started")
    yield


app = FastAPI(
    title="Movies API",
    description="REST API for a movie catalog with per-user ratings",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movies API",
        "docs": "/docs",
        "health": "/api/health",
    }


def run():
    """Serve the app with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())


if __name__ == "__main__":
    run()
