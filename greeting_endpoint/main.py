"""
Application factory and command line entry point.

Serve with ``greeting-endpoint`` or ``uvicorn greeting_endpoint.main:app``.
"""
import argparse
import logging

import uvicorn
from fastapi import FastAPI

from greeting_endpoint import CONFIG
from greeting_endpoint.config import http_audit
from greeting_endpoint.routers import greeting_router
from greeting_endpoint.services.greeting_resource import GreetingResource
from greeting_endpoint.services.greeting_service import GreetingService

logger = logging.getLogger(__name__)


def create_app(resource: GreetingResource | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    :param resource: greeting resource to serve, a fresh one backed by ``GreetingService`` if not given
    """
    if resource is None:
        resource = GreetingResource(GreetingService())

    app = FastAPI(title=CONFIG.main.app_name)
    app.state.resource = resource

    app.add_middleware(http_audit.RequestIdMiddleware)

    app.include_router(greeting_router.create_router(resource))

    return app


app = create_app()


def main() -> None:
    parser = argparse.ArgumentParser(description=CONFIG.main.app_name)
    parser.add_argument(
        "--host",
        type=str,
        default=CONFIG.server.host,
        help="Interface to bind to"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=CONFIG.server.port,
        help="Port to listen on"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (development only)"
    )
    args = parser.parse_args()

    logger.info("Starting %s on %s:%d", CONFIG.main.app_name, args.host, args.port)
    if args.reload:
        uvicorn.run("greeting_endpoint.main:app", host=args.host, port=args.port, reload=True, log_config=None)
    else:
        uvicorn.run(app, host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
