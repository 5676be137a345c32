from typing import List, Optional

from order_ledger.core.errors import InvalidInput, LedgerError
from order_ledger.core.logging import get_logger
from order_ledger.models.order import Order, Payment
from order_ledger.repositories.ledger_repo import LedgerStore
from order_ledger.services.payment_engine import PaymentEngine
from order_ledger.utils.identifiers import IdentifierAllocator
from order_ledger.utils.money import to_cents

logger = get_logger(__name__)


class OrderService:
    """
    Order lifecycle orchestration.

    Every mutating call holds the store lock for its whole duration, so
    there is one logical writer at a time.
    """

    def __init__(
        self,
        store: LedgerStore,
        allocator: Optional[IdentifierAllocator] = None,
        engine: Optional[PaymentEngine] = None,
    ):
        self.store = store
        self.allocator = allocator or IdentifierAllocator()
        self.engine = engine or PaymentEngine(self.allocator)

    def list_orders(self) -> List[Order]:
        return self.store.list_all()

    def get_order(self, order_id: str) -> Order:
        return self.store.snapshot(order_id)

    def create_order(self, description: str, total: float) -> Order:
        """Validate, allocate an id and record a new open order."""
        description = _validate_description(description)
        total_cents = to_cents(total, field="total")

        with self.store.lock:
            order = Order(
                id=self.allocator.new_order_id(self.store.ids()),
                description=description,
                total_cents=total_cents,
                balance_due_cents=total_cents
            )
            self.store.insert(order)

        logger.info("order_created", order_id=order.id, total=order.total)
        return order.model_copy(deep=True)

    def apply_payment_to_order(self, order_id: str, amount: float, note: Optional[str] = None) -> Payment:
        """Apply a payment to an existing order. Raises OrderNotFound if unknown."""
        with self.store.lock:
            order = self.store.find(order_id)
            payment = self.engine.apply_payment(order, amount, note)
        return payment.model_copy()

    def place_order_and_pay(
        self,
        description: str,
        total: float,
        payment_amount: float,
        note: Optional[str] = None,
    ) -> Order:
        """
        Create an order and immediately apply a payment to it.

        Not transactional: if the payment is rejected the new order stays in
        the ledger, unpaid. The raised error carries its id in order_id.
        """
        # Input errors must surface before the order exists
        _validate_description(description)
        to_cents(total, field="total")
        to_cents(payment_amount, field="payment_amount")

        with self.store.lock:
            order = self.create_order(description, total)
            try:
                self.apply_payment_to_order(order.id, payment_amount, note)
            except LedgerError as exc:
                exc.order_id = order.id
                logger.warning(
                    "order_left_unpaid",
                    order_id=order.id,
                    error=type(exc).__name__,
                    detail=exc.message,
                )
                raise
            return self.store.snapshot(order.id)


def _validate_description(description: str) -> str:
    if not isinstance(description, str):
        raise InvalidInput(f"description must be text, got {description!r}")
    description = description.strip()
    if not description:
        raise InvalidInput("description must not be empty")
    return description
