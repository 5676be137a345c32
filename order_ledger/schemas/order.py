from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from order_ledger.core.errors import InvalidAmount
from order_ledger.utils.money import to_cents


def _whole_cents(value: float, field: str) -> float:
    try:
        to_cents(value, field=field)
    except InvalidAmount as exc:
        raise ValueError(exc.message) from exc
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )


class OrderCreate(CamelModel):
    """Request body to create an order."""
    description: str = Field(min_length=1)
    total: float = Field(gt=0, allow_inf_nan=False)

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("description must not be empty")
        return value

    @field_validator("total")
    @classmethod
    def total_in_cents(cls, value: float) -> float:
        return _whole_cents(value, "total")


class PaymentCreate(CamelModel):
    """Request body to apply a payment to an existing order."""
    order_id: str = Field(min_length=1)
    amount: float = Field(gt=0, allow_inf_nan=False)
    note: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def amount_in_cents(cls, value: float) -> float:
        return _whole_cents(value, "amount")


class OrderPayCreate(OrderCreate):
    """Request body to create an order and pay against it in one call."""
    payment_amount: float = Field(gt=0, allow_inf_nan=False)
    note: Optional[str] = None

    @field_validator("payment_amount")
    @classmethod
    def payment_amount_in_cents(cls, value: float) -> float:
        return _whole_cents(value, "paymentAmount")


class PaymentResponse(CamelModel):
    id: str
    amount: float
    applied_at: datetime
    note: Optional[str] = None


class OrderResponse(CamelModel):
    id: str
    description: str
    total: float
    balance_due: float
    payments_applied: List[PaymentResponse] = []


class LedgerErrorResponse(CamelModel):
    detail: str
    error: str
    order_id: Optional[str] = None
