"""btc-qr-tools — client-side Bitcoin QR payload builder."""

from __future__ import annotations

__version__ = "0.1.0"
