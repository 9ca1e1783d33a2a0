"""CORS middleware configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi.middleware.cors import CORSMiddleware

if TYPE_CHECKING:
    from fastapi import FastAPI

# Browsers need these to read the export file name and chosen EC level.
_EXPOSED_HEADERS = ["Content-Disposition", "X-QR-Error-Correction"]


def setup_cors(app: FastAPI, origins: list[str] | None = None) -> None:
    """Add CORS middleware for a browser front end.

    Only ``GET`` and ``POST`` are needed; no credentials are ever sent since
    the service is stateless.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
        expose_headers=_EXPOSED_HEADERS,
    )
