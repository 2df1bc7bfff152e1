"""MCP Server for HotelOps — Streamable HTTP transport.

Runs as a standalone service next to the API and exposes the occupancy
report as an MCP tool.

    python -m hotelops.mcp.server
"""

import contextlib
import logging

import uvicorn
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from hotelops.config import settings
from hotelops.database import async_session_factory
from hotelops.mcp import mcp, set_session_factory

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Make session factory available to tool modules
set_session_factory(async_session_factory)

# Import tool modules to trigger @mcp.tool() registration
import hotelops.mcp.tools.report_tools  # noqa: F401, E402


async def health(request):
    return JSONResponse({"status": "healthy", "service": "hotelops-mcp"})


# Create the MCP ASGI sub-app first so session_manager is initialized
mcp_http_app = mcp.streamable_http_app()


@contextlib.asynccontextmanager
async def lifespan(app: Starlette):
    """Manage MCP session manager lifecycle."""
    async with mcp.session_manager.run():
        logger.info("MCP server started (Streamable HTTP transport)")
        yield
        logger.info("MCP server shutting down")


app = Starlette(
    routes=[
        Route("/health", health),
        Mount("/", app=mcp_http_app),
    ],
    lifespan=lifespan,
)

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.mcp_server_port)
