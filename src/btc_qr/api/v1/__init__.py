"""V1 REST API routes.

Combines all sub-routers under the ``/api/v1`` prefix.
"""

from fastapi import APIRouter

from btc_qr.api.v1.descriptor import router as descriptor_router
from btc_qr.api.v1.seed import router as seed_router
from btc_qr.api.v1.transaction import router as transaction_router
from btc_qr.api.v1.wordlist import router as wordlist_router

v1_router = APIRouter(prefix="/api/v1")

v1_router.include_router(wordlist_router)
v1_router.include_router(seed_router)
v1_router.include_router(descriptor_router)
v1_router.include_router(transaction_router)

__all__ = ["v1_router"]
