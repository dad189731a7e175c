"""HTTP API for submitting receipts and looking up their points."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from receipt_points.models import PointsResponse, ProcessReceiptResponse, Receipt
from receipt_points.scoring import score
from receipt_points.store import InMemoryReceiptStore, ReceiptStore

logger = logging.getLogger(__name__)


def get_store(request: Request) -> ReceiptStore:
    """Return the receipt store attached to the running app."""
    return request.app.state.store  # type: ignore[no-any-return]


StoreDep = Annotated[ReceiptStore, Depends(get_store)]


async def _bad_request_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(
        "Rejected %s %s: %s", request.method, request.url.path, exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Bad Request"},
    )


def create_app(store: ReceiptStore | None = None) -> FastAPI:
    """Create the FastAPI application.

    Accepts an optional store for dependency injection in tests; a fresh
    in-memory store is used otherwise.
    """
    app = FastAPI(title="Receipt Points")
    app.state.store = store if store is not None else InMemoryReceiptStore()
    app.add_exception_handler(RequestValidationError, _bad_request_handler)  # type: ignore[arg-type]

    @app.post("/receipts/process", response_model=ProcessReceiptResponse)
    def process_receipt(receipt: Receipt, store: StoreDep) -> ProcessReceiptResponse:
        receipt_id = store.save(receipt)
        logger.info("Processed receipt %s from %r", receipt_id, receipt.retailer)
        return ProcessReceiptResponse(id=receipt_id)

    @app.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
    def receipt_points(receipt_id: str, store: StoreDep) -> PointsResponse:
        receipt = store.get(receipt_id)
        if receipt is None:
            logger.info("No receipt found for id %s", receipt_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return PointsResponse(points=score(receipt))

    return app


app = create_app()
