"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest
from starlette.responses import Response

from btc_qr import __version__
from btc_qr.api.middleware.cors import setup_cors
from btc_qr.api.v1 import v1_router
from btc_qr.config.settings import AppConfig
from btc_qr.encoders.wordlist import WordlistMatcher
from btc_qr.errors.qr_errors import QRError
from btc_qr.metrics.collector import QRMetrics
from btc_qr.metrics.middleware import PrometheusMiddleware
from btc_qr.render.qr import QRRenderer
from btc_qr.render.service import QRService

logger = logging.getLogger(__name__)


def create_app(*, config: AppConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    Args:
        config: Optional AppConfig. If *None*, a default config is created
            from environment variables.
    """
    if config is None:
        config = AppConfig()

    app = FastAPI(
        title="btc-qr-tools",
        version=__version__,
        description="Bitcoin seed phrase, descriptor and transaction QR codes",
        debug=config.debug,
    )
    app.state.config = config

    # Shared, immutable after startup
    metrics = QRMetrics() if config.metrics.enabled else None
    app.state.metrics = metrics
    app.state.matcher = WordlistMatcher.bip39(config.wordlist.language)
    app.state.qr_service = QRService(QRRenderer(config.render.to_options()), metrics)
    logger.info(
        "Loaded %d-word %s vocabulary", len(app.state.matcher.vocabulary), config.wordlist.language
    )

    # -- Middleware --
    setup_cors(app)
    if metrics is not None:
        app.add_middleware(PrometheusMiddleware, registry=metrics.registry)

    # -- Error handler --
    @app.exception_handler(QRError)
    async def _qr_error_handler(request: Request, exc: QRError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"code": str(exc.code), "message": exc.message},
        )

    # -- Base routes --
    @app.get("/health", tags=["base"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/metrics", tags=["base"], include_in_schema=False)
    async def metrics_endpoint() -> Response:
        """Prometheus metrics endpoint."""
        body = generate_latest(metrics.registry) if metrics is not None else b""
        return Response(
            content=body,
            media_type="text/plain; version=0.0.4; charset=utf-8",
        )

    app.include_router(v1_router)

    return app
