"""CRUD operations for payments."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from payments_api.app.core.errors import PaymentNotFoundError, PaymentStorageError
from payments_api.app.db.session import get_db
from payments_api.app.models.payment import Payment
from payments_api.app.schemas.payment import PaymentCreate

logger = logging.getLogger(__name__)


# Range of the INTEGER primary key; wider values never match a row.
MAX_PAYMENT_ID = 2**31 - 1
MIN_PAYMENT_ID = -(2**31)


def coerce_payment_id(payment_id) -> Optional[int]:
    """Convert a path identifier to the key type, or None if it is not a storable integer."""
    try:
        key = int(str(payment_id).strip())
    except ValueError:
        return None
    if not MIN_PAYMENT_ID <= key <= MAX_PAYMENT_ID:
        return None
    return key


class CRUDPayment:
    def __init__(self, db: Session):
        self.db = db

    def create(self, *, obj_in: PaymentCreate) -> Payment:
        obj = Payment(**obj_in.model_dump())
        self.db.add(obj)
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Insert into payments failed")
            raise PaymentStorageError("Could not create payment") from exc
        self.db.refresh(obj)
        logger.info("Created payment %s", obj.id)
        return obj

    def get_multi(self) -> List[Payment]:
        # Soft-deleted rows are included.
        try:
            return self.db.query(Payment).order_by(Payment.id.asc()).all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Listing payments failed")
            raise PaymentStorageError("Could not get the payments") from exc

    def get(self, payment_id) -> Payment:
        key = coerce_payment_id(payment_id)
        if key is None:
            raise PaymentNotFoundError(payment_id)
        try:
            payment = self.db.query(Payment).filter(Payment.id == key).first()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Lookup of payment %s failed", key)
            raise PaymentNotFoundError(payment_id) from exc
        if payment is None:
            raise PaymentNotFoundError(payment_id)
        return payment

    def update(self, payment_id, fields: Dict[str, Any]) -> int:
        """Write only the columns in ``fields``; return the affected row count.

        There is no existence check: an unknown id simply matches zero rows.
        """
        key = coerce_payment_id(payment_id)
        if key is None or not fields:
            return 0
        try:
            affected = (
                self.db.query(Payment)
                .filter(Payment.id == key)
                .update(fields, synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Update of payment %s failed", key)
            raise PaymentStorageError("Failed to update payment") from exc
        logger.info("Updated payment %s (%s), %d row(s)", key, ", ".join(sorted(fields)), affected)
        return affected

    def soft_delete(self, payment_id) -> Payment:
        payment = self.get(payment_id)
        payment.is_deleted = True
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Soft delete of payment %s failed", payment.id)
            raise PaymentStorageError("Could not update payment") from exc
        self.db.refresh(payment)
        logger.info("Marked payment %s as deleted", payment.id)
        return payment


def get_payment_crud(db: Session = Depends(get_db)) -> CRUDPayment:
    return CRUDPayment(db)
