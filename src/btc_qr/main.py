"""Application entry point for the btc-qr-tools HTTP service."""

from __future__ import annotations

import os

import uvicorn

from btc_qr.config.settings import AppConfig


def main() -> None:
    """Start the btc-qr-tools server."""
    config = AppConfig()
    reload = os.getenv("BTCQR_RELOAD", "false").lower() in ("1", "true", "yes")
    uvicorn.run(
        "btc_qr.api.app:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
        reload=reload,
        log_level="debug" if config.debug else "info",
    )


if __name__ == "__main__":
    main()
