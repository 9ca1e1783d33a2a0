"""Wallet output descriptor endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from starlette.responses import Response  # noqa: TC002

from btc_qr.api.dependencies import get_qr_service
from btc_qr.api.schemas import DescriptorClassification, DescriptorRequest
from btc_qr.api.v1.responses import PNG_RESPONSE, png_response
from btc_qr.encoders.descriptor import DescriptorEncoder, classify, is_valid_descriptor
from btc_qr.render.export import ExportMode
from btc_qr.render.service import QRService  # noqa: TC001

router = APIRouter(tags=["descriptor"])


@router.post("/descriptor/classify")
def classify_descriptor(body: DescriptorRequest) -> DescriptorClassification:
    """Detect the descriptor type from its script prefix."""
    variant = classify(body.descriptor)
    return DescriptorClassification(
        variant=variant,
        label=variant.label,
        valid=is_valid_descriptor(body.descriptor),
    )


@router.post("/descriptor/qr", response_class=Response, responses=PNG_RESPONSE)
def descriptor_qr(
    body: DescriptorRequest,
    service: Annotated[QRService, Depends(get_qr_service)],
) -> Response:
    """Render the trimmed descriptor verbatim as a QR code."""
    encoder = DescriptorEncoder(body.descriptor)
    image = service.generate(
        ExportMode.WALLET_DESCRIPTOR, encoder.encode(), encoder.error_correction
    )
    return png_response(image)
