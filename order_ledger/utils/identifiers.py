"""Random identifier allocation for orders and payments."""
import secrets
from typing import Callable, Collection, Optional

from order_ledger.core.config import settings
from order_ledger.core.errors import AllocationExhausted


class IdentifierAllocator:
    """
    Hands out fixed-length hex tokens.

    Order ids are checked against the live id set and regenerated on
    collision, up to max_attempts. Payment ids are not checked.
    """

    def __init__(
        self,
        order_id_bytes: Optional[int] = None,
        payment_id_bytes: Optional[int] = None,
        max_attempts: Optional[int] = None,
        token_factory: Callable[[int], str] = secrets.token_hex,
    ):
        self.order_id_bytes = order_id_bytes or settings.ORDER_ID_BYTES
        self.payment_id_bytes = payment_id_bytes or settings.PAYMENT_ID_BYTES
        self.max_attempts = max_attempts or settings.ID_ALLOCATION_MAX_ATTEMPTS
        self._token = token_factory

    def new_order_id(self, existing_ids: Collection[str]) -> str:
        for _ in range(self.max_attempts):
            candidate = self._token(self.order_id_bytes)
            if candidate not in existing_ids:
                return candidate
        raise AllocationExhausted(self.max_attempts)

    def new_payment_id(self) -> str:
        # Payment ids are not checked for collisions.
        return self._token(self.payment_id_bytes)
