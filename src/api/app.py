"""FastAPI application factory"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.adapter.repositories.invoice_repository import JsonFileInvoiceRepository
from src.api.error import ClientError, client_error_handler, unhandled_error_handler
from src.api.routes import invoices

logger = logging.getLogger(__name__)


def _init_sentry(config) -> None:
    import sentry_sdk

    sentry_sdk.init(dsn=config.DSN_SENTRY, environment=config.SENTRY_ENVIRONMENT)
    logger.info(f"Sentry enabled ({config.SENTRY_ENVIRONMENT})")


def create_app(config) -> FastAPI:
    """
    Build the invoice API

    The invoice repository is created here, once per application, and
    loaded from its backing file on startup.
    """
    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        _init_sentry(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await app.state.invoice_repository.load()
        logger.info(f"Invoice service listening on {config.API_HOST}:{config.API_PORT}{config.API_PREFIX}")
        yield

    app = FastAPI(title="Invoice Service", lifespan=lifespan)
    app.state.invoice_repository = JsonFileInvoiceRepository(config.STORAGE_FILE)

    cors_origins = config.CORS_ORIGINS or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS and cors_origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
            )
            return response

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(invoices.router, prefix=config.API_PREFIX)

    return app
