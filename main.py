"""
Color Tools MCP Server - FastAPI implementation
Provides endpoints for color parsing and conversion
"""

from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

from chroma_convert import __version__
from config import get_settings
from logging_config import setup_logging, get_logger

# Routers and shared state
from routers import colorTools_router

logger = get_logger("main")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Color Tools MCP Server",
        description="A FastAPI server for color parsing and conversion",
        version=__version__,
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    # Mount routers (paths unchanged)
    app.include_router(colorTools_router)
    return app


app = create_app()

if __name__ == "__main__":
    settings = get_settings()
    setup_logging(level=settings.log_level, log_format=settings.log_format)
    if settings.mcp_enabled:
        mcp = FastApiMCP(app, exclude_operations=[])
        mcp.mount_http()
        logger.info("MCP server mounted")
    logger.info("Listening on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
