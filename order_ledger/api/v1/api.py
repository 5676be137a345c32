from fastapi import APIRouter
from order_ledger.api.v1.endpoints import orders, payments

api_router = APIRouter()

api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(payments.router, prefix="/payments", tags=["payments"])
