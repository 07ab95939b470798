"""FastAPI application factory"""

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.adapter.repositories.points_ledger_repository import InMemoryPointsLedgerRepository
from src.api.error import ClientError, client_error_handler
from src.api.routes import health, points
from src.app.repositories.points_ledger_repository import PointsLedgerRepository
from src.logging_config import configure_logging
from src.worker.ledger_reconciler import LedgerReconcilerWorker

logger = logging.getLogger(__name__)


def create_app(config, ledger: Optional[PointsLedgerRepository] = None) -> FastAPI:
    """
    Build the points API

    Args:
        config: ApplicationConfig-like object
        ledger: Ledger to serve; a fresh in-memory ledger when omitted
    """
    configure_logging(config.LOG_LEVEL, getattr(config, "LOG_PATH", None))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        worker = None
        task = None
        if config.RECONCILIATION_ENABLED:
            worker = LedgerReconcilerWorker(app.state.ledger)
            task = asyncio.create_task(
                worker.run_forever(interval_seconds=config.RECONCILIATION_INTERVAL_SECONDS)
            )
        yield
        if worker:
            worker.stop()
            await task

    app = FastAPI(title="Points Ledger Service", lifespan=lifespan)
    app.state.ledger = ledger if ledger is not None else InMemoryPointsLedgerRepository()

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            start_time = time.time()
            response = await call_next(request)
            elapsed_ms = int((time.time() - start_time) * 1000)
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms}ms)"
            )
            return response

    app.add_exception_handler(ClientError, client_error_handler)

    app.include_router(health.router, prefix=config.API_PREFIX)
    app.include_router(points.router, prefix=config.API_PREFIX)

    return app
