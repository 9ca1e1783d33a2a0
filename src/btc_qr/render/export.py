"""Deterministic file names for exported QR images."""

from __future__ import annotations

import enum


class ExportMode(enum.StrEnum):
    """Which composer produced the image."""

    SEED_PHRASE = "seed-phrase"
    WALLET_DESCRIPTOR = "wallet-descriptor"
    PAYMENT_URI = "payment-uri"
    PSBT = "psbt"
    RAW_TX = "raw"


def export_filename(mode: ExportMode | str) -> str:
    """Return the PNG file name for *mode*, e.g. ``seed-phrase-qr.png``.

    Transaction formats share their value with the matching export mode, so
    a ``TransactionFormat`` may be passed directly.
    """
    return f"{ExportMode(str(mode))}-qr.png"
