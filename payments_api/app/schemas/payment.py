"""Payment schemas.

Payloads use camelCase keys on the wire (``creditorAcc``, ``isDeleted``);
snake_case names are accepted on input as well.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Amounts are stored as NUMERIC but rendered as JSON numbers.
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class PaymentSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaymentCreate(PaymentSchema):
    creditor_acc: Optional[str] = None
    debtor_acc: Optional[str] = None
    currency: Optional[str] = None
    amount: Optional[Amount] = None
    date: Optional[datetime] = None
    is_deleted: bool = False


class PaymentUpdate(PaymentSchema):
    amount: Optional[Amount] = None
    date: Optional[datetime] = None

    def field_mask(self) -> Dict[str, Any]:
        """Return only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class PaymentRead(PaymentSchema):
    id: int
    creditor_acc: Optional[str] = None
    debtor_acc: Optional[str] = None
    currency: Optional[str] = None
    amount: Optional[Amount] = None
    date: Optional[datetime] = None
    is_deleted: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class MessageResponse(BaseModel):
    message: str


class PaymentResponse(MessageResponse):
    data: PaymentRead


class PaymentListResponse(MessageResponse):
    data: List[PaymentRead]
