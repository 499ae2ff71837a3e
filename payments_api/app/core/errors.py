"""Error types and the JSON error envelope.

Route handlers raise ``PaymentAPIError``; the registered handler renders it as
``{"message": ...}`` with the chosen status code. The repository raises the
``PaymentError`` family and never touches HTTP.
"""

import logging
from typing import Type, TypeVar

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class PaymentError(Exception):
    """Base class for repository failures."""


class PaymentNotFoundError(PaymentError):
    def __init__(self, payment_id):
        super().__init__(f"Payment {payment_id!r} not found")
        self.payment_id = payment_id


class PaymentStorageError(PaymentError):
    """A database read or write failed."""


class PaymentAPIError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


async def payment_api_error_handler(request: Request, exc: PaymentAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PaymentAPIError, payment_api_error_handler)


async def parse_json_body(request: Request, schema: Type[SchemaT], *, status_code: int, message: str) -> SchemaT:
    """Parse the request body into ``schema``.

    Malformed JSON and validation failures both become a ``PaymentAPIError``
    carrying ``status_code`` and ``message``.
    """
    try:
        raw = await request.json()
        return schema.model_validate(raw)
    except ValueError as exc:
        # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
        logger.warning("Rejected %s body on %s: %s", schema.__name__, request.url.path, exc)
        raise PaymentAPIError(status_code, message) from exc
