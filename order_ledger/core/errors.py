"""Ledger error taxonomy.

Every failure the core can produce is a LedgerError subclass. The API layer
maps them onto HTTP responses; nothing inside the core catches them.
"""
from typing import Optional


class LedgerError(Exception):
    """Base class for ledger failures."""

    def __init__(self, message: str, order_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.order_id = order_id

    def __str__(self) -> str:
        return self.message


class InvalidInput(LedgerError):
    """Bad description, total or amount."""
    pass


class InvalidAmount(InvalidInput):
    """Non-positive or non-finite monetary amount."""
    pass


class OrderNotFound(LedgerError):
    def __init__(self, order_id: str):
        super().__init__(f"no order exists with id {order_id}", order_id=order_id)


class NoBalanceDue(LedgerError):
    def __init__(self, order_id: str):
        super().__init__(
            f"order {order_id} has no balance due; no further payments are accepted",
            order_id=order_id,
        )


class PaymentExceedsBalance(LedgerError):
    def __init__(self, order_id: str, amount_cents: int, balance_due_cents: int):
        self.amount_cents = amount_cents
        self.balance_due_cents = balance_due_cents
        self.amount = amount_cents / 100
        self.balance_due = balance_due_cents / 100
        super().__init__(
            f"payment of {self.amount} exceeds the balance due of {self.balance_due} "
            f"on order {order_id}; resubmit with a corrected amount",
            order_id=order_id,
        )


class DuplicateId(LedgerError):
    def __init__(self, order_id: str):
        super().__init__(f"an order with id {order_id} already exists", order_id=order_id)


class AllocationExhausted(LedgerError):
    def __init__(self, attempts: int):
        super().__init__(f"could not allocate a unique id after {attempts} attempts")
        self.attempts = attempts
