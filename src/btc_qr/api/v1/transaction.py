"""Transaction payload endpoints: payment URI, PSBT and raw transaction."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from starlette.responses import Response  # noqa: TC002

from btc_qr.api.dependencies import get_qr_service
from btc_qr.api.schemas import TransactionPayloadResponse, TransactionRequest
from btc_qr.api.v1.responses import PNG_RESPONSE, png_response
from btc_qr.encoders.transaction import TransactionFields, build_transaction_payload
from btc_qr.render.export import ExportMode
from btc_qr.render.service import QRService  # noqa: TC001

router = APIRouter(tags=["transaction"])


def _fields(body: TransactionRequest) -> TransactionFields:
    return TransactionFields(
        address=body.address,
        amount=body.amount,
        label=body.label,
        message=body.message,
        data=body.data,
    )


@router.post("/transaction/payload")
def transaction_payload(body: TransactionRequest) -> TransactionPayloadResponse:
    """Validate the fields and return the string that would be encoded."""
    result = build_transaction_payload(body.format, _fields(body))
    return TransactionPayloadResponse(
        format=body.format,
        payload=result.unwrap(),
        error_correction=body.format.error_correction,
    )


@router.post("/transaction/qr", response_class=Response, responses=PNG_RESPONSE)
def transaction_qr(
    body: TransactionRequest,
    service: Annotated[QRService, Depends(get_qr_service)],
) -> Response:
    """Render the transaction payload for the selected format."""
    result = build_transaction_payload(body.format, _fields(body))
    image = service.generate(
        ExportMode(str(body.format)), result, body.format.error_correction
    )
    return png_response(image)
