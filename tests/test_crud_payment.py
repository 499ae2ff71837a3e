import pytest
from datetime import datetime
from decimal import Decimal

from payments_api.app.core.errors import PaymentNotFoundError
from payments_api.app.crud.crud_payment import CRUDPayment, coerce_payment_id
from payments_api.app.db.base import Base
from payments_api.app.db.session import SessionLocal, engine
from payments_api.app.schemas.payment import PaymentCreate, PaymentUpdate


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def crud():
    db = SessionLocal()
    try:
        yield CRUDPayment(db)
    finally:
        db.close()


def test_coerce_payment_id():
    assert coerce_payment_id("42") == 42
    assert coerce_payment_id(" 7 ") == 7
    assert coerce_payment_id("abc") is None
    assert coerce_payment_id("1.5") is None


def test_coerce_payment_id_rejects_values_outside_key_range():
    assert coerce_payment_id(str(2**31 - 1)) == 2**31 - 1
    assert coerce_payment_id(str(-(2**31))) == -(2**31)
    assert coerce_payment_id(str(2**31)) is None
    assert coerce_payment_id("99999999999999999999999") is None


def test_get_maps_query_failure_to_not_found(crud):
    Base.metadata.drop_all(bind=engine)
    with pytest.raises(PaymentNotFoundError):
        crud.get("1")


def test_create_assigns_id(crud):
    payment = crud.create(obj_in=PaymentCreate(currency="USD", amount=Decimal("12.34")))
    assert payment.id is not None
    assert payment.is_deleted is False
    assert payment.amount == Decimal("12.34")


def test_get_raises_for_unknown_and_non_numeric_ids(crud):
    with pytest.raises(PaymentNotFoundError):
        crud.get("999")
    with pytest.raises(PaymentNotFoundError):
        crud.get("abc")


def test_update_writes_only_masked_fields(crud):
    created = crud.create(
        obj_in=PaymentCreate(amount=Decimal("10.00"), date=datetime(2024, 1, 1, 12, 0, 0), currency="USD")
    )
    mask = PaymentUpdate.model_validate({"amount": 20}).field_mask()
    assert mask == {"amount": Decimal("20")}

    affected = crud.update(str(created.id), mask)
    assert affected == 1

    crud.db.expire_all()
    payment = crud.get(str(created.id))
    assert payment.amount == Decimal("20.00")
    assert payment.date == datetime(2024, 1, 1, 12, 0, 0)
    assert payment.currency == "USD"


def test_update_explicit_null_clears_field(crud):
    created = crud.create(obj_in=PaymentCreate(amount=Decimal("10.00")))
    mask = PaymentUpdate.model_validate({"amount": None}).field_mask()
    assert mask == {"amount": None}

    crud.update(str(created.id), mask)
    crud.db.expire_all()
    assert crud.get(str(created.id)).amount is None


def test_update_with_empty_mask_touches_nothing(crud):
    created = crud.create(obj_in=PaymentCreate(amount=Decimal("10.00")))
    assert PaymentUpdate.model_validate({}).field_mask() == {}
    assert crud.update(str(created.id), {}) == 0


def test_update_unknown_id_affects_zero_rows(crud):
    assert crud.update("999", {"amount": Decimal("1")}) == 0
    assert crud.update("abc", {"amount": Decimal("1")}) == 0
    assert crud.get_multi() == []


def test_soft_delete_sets_flag_and_keeps_row(crud):
    created = crud.create(obj_in=PaymentCreate(currency="USD"))
    deleted = crud.soft_delete(str(created.id))
    assert deleted.is_deleted is True

    rows = crud.get_multi()
    assert [p.id for p in rows] == [created.id]
    assert rows[0].is_deleted is True


def test_soft_delete_unknown_id_raises(crud):
    with pytest.raises(PaymentNotFoundError):
        crud.soft_delete("999")
