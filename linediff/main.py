"""
linediff Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from linediff.routers import config, diff
from linediff.services.config_manager import ConfigManager

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Call this once at app startup."""
    root_logger = logging.getLogger()

    # Clear any existing handlers (prevents duplicates)
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )

    root_logger.addHandler(handler)
    root_logger.setLevel(level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    config_manager = ConfigManager.get_instance()
    setup_logging(config_manager.get("logLevel", "INFO"))
    logger.info(f"Starting linediff backend, config at {config_manager.config_file}")

    yield

    logger.info("Shutting down linediff backend...")


app = FastAPI(
    title="linediff Backend",
    description="Line-based structural diff between a candidate and a reference text",
    version="1.0.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "linediff-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "127.0.0.1"), port=server.get("port", 8000))
