"""BodyFuel Calculator Server - Entry point.

Runs the calculator HTTP API and MCP server with uvicorn.
Uses Starlette with the MCP HTTP app mounted at root.
"""

import logging

import uvicorn
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route, Mount

from .core.labels import LABELS, describe_options, is_supported_language
from .shell.config import ServerConfig, load_server_config
from .shell.mcp_server import mcp, run_calculation


logger = logging.getLogger(__name__)

CALCULATE_FIELDS = ("age", "height_cm", "weight_kg", "sex", "activity", "goal")


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# ==================== Route Handlers ====================


async def health_check(request: Request) -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse({"status": "healthy", "service": "bodyfuel-calculator"})


async def list_options(request: Request) -> JSONResponse:
    """Describe form fields, choices and ranges."""
    lang = request.query_params.get("lang", "en")
    if not is_supported_language(lang):
        return JSONResponse(
            {"error": f"Unsupported language '{lang}'. Use one of: {', '.join(LABELS)}."},
            status_code=400,
        )
    return JSONResponse(describe_options(lang))


async def calculate(request: Request) -> JSONResponse:
    """Validate form input and return daily calorie and macro targets."""
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse({"error": "Request body must be a JSON object"}, status_code=400)

    if not isinstance(body, dict):
        return JSONResponse({"error": "Request body must be a JSON object"}, status_code=400)

    try:
        payload = run_calculation(
            **{name: body.get(name) for name in CALCULATE_FIELDS},
            lang=body.get("lang") or "en",
        )
    except Exception as e:
        logger.error("Calculation failed: %s", str(e))
        return JSONResponse({"error": "Calculation failed."}, status_code=500)

    if "error" in payload:
        return JSONResponse(payload, status_code=400)

    return JSONResponse(payload)


# ==================== Create ASGI App ====================


def create_app(config: ServerConfig | None = None) -> Starlette:
    """Create the Starlette application with MCP at root.

    The MCP streamable_http_app() handles /mcp/ internally when mounted at root.
    We use its lifespan context to ensure proper initialization.
    """
    config = config or load_server_config()

    mcp_app = mcp.streamable_http_app()

    # Custom routes first, then MCP app at root
    routes = [
        Route("/health", health_check, methods=["GET"]),
        Route("/options", list_options, methods=["GET"]),
        Route("/calculate", calculate, methods=["POST"]),
        Mount("/", app=mcp_app),
    ]

    app = Starlette(
        routes=routes,
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=config.cors_origins,
                allow_methods=["GET", "POST", "OPTIONS"],
                allow_headers=["*"],
            ),
        ],
        lifespan=mcp_app.router.lifespan_context,
    )

    return app


# Create app at module level for ASGI servers
app = create_app()


def main() -> None:
    """Run the server."""
    config = load_server_config()
    configure_logging(config.log_level)

    logger.info("Starting BodyFuel calculator on %s:%d", config.host, config.port)

    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
