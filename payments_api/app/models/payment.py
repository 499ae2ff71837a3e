"""Payment model: the single record the API manages."""

from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String, false

from payments_api.app.db.base_class import Base


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    creditor_acc = Column(String(255), nullable=True)
    debtor_acc = Column(String(255), nullable=True)
    currency = Column(String(16), nullable=True)
    amount = Column(Numeric(asdecimal=True), nullable=True)
    date = Column(DateTime(timezone=True), nullable=True)
    # Soft-delete marker; rows are never removed.
    is_deleted = Column(Boolean, nullable=False, default=False, server_default=false())
