"""
LedgerStore - authoritative in-memory collection of orders.

Holds:
- the orders in creation order
- an id -> order index for O(1) lookups
- the lock that serializes writers

Reads hand out deep copies taken under the lock, so callers never see a
payment half-applied and cannot mutate ledger state behind the engine's back.
"""

import threading
from typing import Dict, List, Set

from order_ledger.core.errors import DuplicateId, OrderNotFound
from order_ledger.models.order import Order


class LedgerStore:
    """Repository for orders (process lifetime only)."""

    def __init__(self):
        self._orders: List[Order] = []
        self._index: Dict[str, Order] = {}
        self.lock = threading.RLock()

    def __len__(self) -> int:
        with self.lock:
            return len(self._orders)

    def insert(self, order: Order) -> Order:
        """Add a new order. Raises DuplicateId if the id is taken."""
        with self.lock:
            if order.id in self._index:
                raise DuplicateId(order.id)
            self._orders.append(order)
            self._index[order.id] = order
            return order

    def exists(self, order_id: str) -> bool:
        with self.lock:
            return order_id in self._index

    def find(self, order_id: str) -> Order:
        """
        Return the live order for mutation by the service layer.

        Callers outside the service layer should use snapshot().
        """
        with self.lock:
            order = self._index.get(order_id)
            if order is None:
                raise OrderNotFound(order_id)
            return order

    def snapshot(self, order_id: str) -> Order:
        """Return a detached copy of one order."""
        with self.lock:
            return self.find(order_id).model_copy(deep=True)

    def list_all(self) -> List[Order]:
        """All orders in creation order, as detached copies."""
        with self.lock:
            return [order.model_copy(deep=True) for order in self._orders]

    def ids(self) -> Set[str]:
        with self.lock:
            return set(self._index)
