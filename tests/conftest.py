import pytest
from fastapi.testclient import TestClient

from order_ledger.main import app
from order_ledger.repositories.ledger_repo import LedgerStore
from order_ledger.services.order_service import OrderService
from order_ledger.utils.identifiers import IdentifierAllocator


@pytest.fixture
def store() -> LedgerStore:
    """Fresh, empty ledger."""
    return LedgerStore()


@pytest.fixture
def allocator() -> IdentifierAllocator:
    return IdentifierAllocator(order_id_bytes=10, payment_id_bytes=10, max_attempts=16)


@pytest.fixture
def service(store, allocator) -> OrderService:
    return OrderService(store, allocator=allocator)


@pytest.fixture
def widget_order(service):
    """The order from the Widget scenario: total 100.0, nothing paid."""
    return service.create_order("Widget", 100.0)


@pytest.fixture
def client():
    """FastAPI test client with a fresh ledger per test."""
    # Context manager runs the lifespan, which builds a new LedgerStore
    with TestClient(app) as test_client:
        yield test_client
