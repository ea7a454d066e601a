"""FastAPI application entry point for the product list API."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from errors import register_error_handlers

JSON_LOG_FORMAT = '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}'

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
}

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """JSON lines to stdout in production, short human-readable lines locally."""
    if settings.is_production:
        logging.basicConfig(level=logging.INFO, format=JSON_LOG_FORMAT, stream=sys.stdout)
    else:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    problems = settings.validate()
    if problems:
        logger.warning("Unusable env vars (check configuration): %s", ", ".join(problems))
    logger.info("Serving product list to origins: %s", ", ".join(settings.cors_origins))
    yield


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Product List API", version="1.0.0", lifespan=lifespan)

    # Hostname and numeric loopback origins must each be listed
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.products import router as products_router

    app.include_router(health_router)
    app.include_router(products_router)

    return app


app = create_app()
