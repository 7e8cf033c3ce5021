"""FastAPI application."""

import argparse
from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from busaggregator.controllers.catalog_controllers import catalog_router
from busaggregator.controllers.error_handlers import register_error_handlers
from busaggregator.controllers.search_controllers import search_router
from busaggregator.logger_config import get_logger
from busaggregator.services.route_search.service import create_route_search_service
from configs import Settings, settings

logger = get_logger("app", level=settings.LOG_LEVEL)

API_VERSION = "1.0.0"


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and wire a single route search service into it."""
    app_settings = app_settings or settings
    for name in ("api", "route_search"):
        get_logger(name, level=app_settings.LOG_LEVEL)

    logger.info("Starting FastAPI application...")
    app = FastAPI(
        title="Bus Booking Aggregator API",
        root_path=app_settings.ROOT_PATH_BACKEND,
        description="Search bus routes across several booking platforms at once.",
        version=API_VERSION,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    register_error_handlers(app)

    service = create_route_search_service(app_settings)
    app.state.route_search_service = service
    logger.info(
        "Registered providers: %s",
        ", ".join(provider.name for provider in service.providers) or "<none>",
    )

    app.include_router(search_router)
    app.include_router(catalog_router)

    @app.get("/", response_description="API info")
    async def index() -> Dict[str, Any]:
        """Define a route for handling HTTP GET requests to the root URL ("/")."""
        return {
            "status": "success",
            "message": "Welcome to Bus Booking Aggregator API",
            "data": {"version": API_VERSION},
        }

    @app.get("/health", response_description="Api healthcheck")
    async def health() -> Dict[str, str]:
        return {"status": "success", "message": "Service is healthy"}

    return app


app = create_app()


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--docker", action="store_true", help="Running with docker")
    parser.add_argument("--host", default="0.0.0.0", help="Application host.")
    parser.add_argument("--port", default="8080", help="Application port.")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development purposes.",
    )
    args = parser.parse_args()
    if not args.docker:
        from dotenv import load_dotenv

        load_dotenv(".env")

    import uvicorn

    logger.info("Example: http://%s:%s/routes?from=Mumbai&to=Pune&date=2025-08-21&passengers=2", args.host, args.port)
    uvicorn.run("app:app", host=args.host, port=int(args.port), reload=args.reload)


if __name__ == "__main__":
    main()
