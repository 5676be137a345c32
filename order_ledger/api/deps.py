from fastapi import Request

from order_ledger.services.order_service import OrderService


def get_order_service(request: Request) -> OrderService:
    """Return the ledger service built at application startup."""
    return request.app.state.order_service
