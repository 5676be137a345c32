"""
Order model - billable entities and the payments applied to them.

Design principles:
- An order owns its payments; payments carry no back-reference
- total and id are fixed at creation
- balance_due only ever goes down, and only through the payment engine
- Status: open (balance_due > 0) -> settled (balance_due == 0), settled is terminal
- All amounts in integer cents; float views are exposed for serialization
"""

from typing import List, Optional
from datetime import datetime
from pydantic import ConfigDict, Field, computed_field

from order_ledger.models.base import LedgerModel, _utcnow
from order_ledger.utils.money import from_cents


class Payment(LedgerModel):
    """
    Money applied against one order.

    Immutable once recorded.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    amount_cents: int = Field(gt=0)
    note: Optional[str] = None
    applied_at: datetime = Field(default_factory=_utcnow)

    @computed_field
    @property
    def amount(self) -> float:
        return from_cents(self.amount_cents)


class Order(LedgerModel):
    """
    Billable entity with a running balance.

    Invariants:
    - 0 <= balance_due_cents <= total_cents
    - balance_due_cents == total_cents - sum(p.amount_cents for p in payments_applied)
    """
    id: str = Field(frozen=True)
    description: str
    total_cents: int = Field(gt=0, frozen=True)
    balance_due_cents: int = Field(ge=0)
    payments_applied: List[Payment] = Field(default_factory=list)

    @computed_field
    @property
    def total(self) -> float:
        return from_cents(self.total_cents)

    @computed_field
    @property
    def balance_due(self) -> float:
        return from_cents(self.balance_due_cents)

    def amount_paid_cents(self) -> int:
        """Sum of all payments recorded so far."""
        return sum(p.amount_cents for p in self.payments_applied)

    def is_settled(self) -> bool:
        """Check if nothing remains to be paid."""
        return self.balance_due_cents == 0
