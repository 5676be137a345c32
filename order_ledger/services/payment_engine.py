from typing import Optional

from order_ledger.core.errors import NoBalanceDue, PaymentExceedsBalance
from order_ledger.core.logging import get_logger
from order_ledger.models.order import Order, Payment
from order_ledger.utils.identifiers import IdentifierAllocator
from order_ledger.utils.money import to_cents

logger = get_logger(__name__)


class PaymentEngine:
    """Sole writer of Order.balance_due_cents and Order.payments_applied."""

    def __init__(self, allocator: IdentifierAllocator):
        self.allocator = allocator

    def apply_payment(self, order: Order, amount: float, note: Optional[str] = None) -> Payment:
        """
        Apply a payment to an order.

        All checks run before anything is touched, so a rejected payment
        leaves the order exactly as it was.
        """
        amount_cents = to_cents(amount)

        if order.balance_due_cents == 0:
            logger.info("payment_rejected", order_id=order.id, reason="no_balance_due", amount=amount)
            raise NoBalanceDue(order.id)

        if amount_cents > order.balance_due_cents:
            logger.info(
                "payment_rejected",
                order_id=order.id,
                reason="exceeds_balance",
                amount=amount,
                balance_due=order.balance_due,
            )
            raise PaymentExceedsBalance(order.id, amount_cents, order.balance_due_cents)

        payment = Payment(
            id=self.allocator.new_payment_id(),
            amount_cents=amount_cents,
            note=note
        )
        new_balance_cents = order.balance_due_cents - amount_cents

        order.payments_applied.append(payment)
        order.balance_due_cents = new_balance_cents

        logger.info(
            "payment_applied",
            order_id=order.id,
            payment_id=payment.id,
            amount=payment.amount,
            balance_due=order.balance_due,
        )
        return payment
