"""Payment CRUD endpoints.

Status codes and messages are fixed per endpoint and deliberately not uniform:
empty identifiers give 500 on get/delete but 400 on update, and bad payloads
give 422 on create but 400 on update.
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from payments_api.app.core.errors import (
    PaymentAPIError,
    PaymentNotFoundError,
    PaymentStorageError,
    parse_json_body,
)
from payments_api.app.crud.crud_payment import CRUDPayment, get_payment_crud
from payments_api.app.schemas.payment import (
    MessageResponse,
    PaymentCreate,
    PaymentListResponse,
    PaymentRead,
    PaymentResponse,
    PaymentUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payments"])


def _require_id(payment_id: str, status_code: int, message: str) -> str:
    if not payment_id or not payment_id.strip():
        logger.warning("Rejected request without payment id")
        raise PaymentAPIError(status_code, message)
    return payment_id.strip()


@router.post("/create_payment", response_model=MessageResponse)
async def create_payment(request: Request, crud: CRUDPayment = Depends(get_payment_crud)):
    payment_in = await parse_json_body(
        request,
        PaymentCreate,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        message="Request failed",
    )
    try:
        crud.create(obj_in=payment_in)
    except PaymentStorageError as exc:
        raise PaymentAPIError(status.HTTP_400_BAD_REQUEST, "Could not create payment") from exc
    return {"message": "Payment has been added."}


@router.get("/payments", response_model=PaymentListResponse)
async def list_payments(crud: CRUDPayment = Depends(get_payment_crud)):
    try:
        payments = crud.get_multi()
    except PaymentStorageError as exc:
        raise PaymentAPIError(status.HTTP_400_BAD_REQUEST, "Could not get the payments") from exc
    return {
        "message": "Payments fetched succesfully",
        "data": [PaymentRead.model_validate(payment) for payment in payments],
    }


@router.get("/get-payment/{payment_id}", response_model=PaymentResponse)
async def get_payment(payment_id: str, crud: CRUDPayment = Depends(get_payment_crud)):
    payment_id = _require_id(payment_id, status.HTTP_500_INTERNAL_SERVER_ERROR, "Id could not be empty")
    try:
        payment = crud.get(payment_id)
    except PaymentNotFoundError as exc:
        logger.warning("%s", exc)
        raise PaymentAPIError(status.HTTP_400_BAD_REQUEST, "Could not get the payment") from exc
    return {"message": "Payment Id fetch successfully", "data": PaymentRead.model_validate(payment)}


@router.put("/update-payment/{payment_id}", response_model=MessageResponse)
async def update_payment(payment_id: str, request: Request, crud: CRUDPayment = Depends(get_payment_crud)):
    payment_id = _require_id(payment_id, status.HTTP_400_BAD_REQUEST, "ID is required")
    payment_in = await parse_json_body(
        request,
        PaymentUpdate,
        status_code=status.HTTP_400_BAD_REQUEST,
        message="Failed to parse request",
    )
    try:
        crud.update(payment_id, payment_in.field_mask())
    except PaymentStorageError as exc:
        raise PaymentAPIError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update payment") from exc
    return {"message": "Payment updated successfully"}


@router.delete("/delete-payment/{payment_id}", response_model=MessageResponse)
async def delete_payment(payment_id: str, crud: CRUDPayment = Depends(get_payment_crud)):
    payment_id = _require_id(payment_id, status.HTTP_500_INTERNAL_SERVER_ERROR, "Id cannot be empty.")
    try:
        crud.soft_delete(payment_id)
    except PaymentNotFoundError as exc:
        logger.warning("%s", exc)
        raise PaymentAPIError(status.HTTP_400_BAD_REQUEST, "Could not find the payment") from exc
    except PaymentStorageError as exc:
        raise PaymentAPIError(status.HTTP_400_BAD_REQUEST, "Could not update payment") from exc
    return {"message": "Payment marked as deleted."}


# Bare paths so a missing identifier gets the same answer as an empty one.
@router.get("/get-payment/", response_model=PaymentResponse, include_in_schema=False)
async def get_payment_without_id(crud: CRUDPayment = Depends(get_payment_crud)):
    return await get_payment("", crud)


@router.put("/update-payment/", response_model=MessageResponse, include_in_schema=False)
async def update_payment_without_id(request: Request, crud: CRUDPayment = Depends(get_payment_crud)):
    return await update_payment("", request, crud)


@router.delete("/delete-payment/", response_model=MessageResponse, include_in_schema=False)
async def delete_payment_without_id(crud: CRUDPayment = Depends(get_payment_crud)):
    return await delete_payment("", crud)
