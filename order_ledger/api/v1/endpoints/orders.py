from typing import List
from fastapi import APIRouter, Depends
from order_ledger.api.deps import get_order_service
from order_ledger.schemas.order import OrderCreate, OrderPayCreate, OrderResponse
from order_ledger.services.order_service import OrderService

router = APIRouter()

@router.get("/", response_model=List[OrderResponse])
async def list_orders(service: OrderService = Depends(get_order_service)):
    """List all orders in creation order"""
    return service.list_orders()

@router.post("/", response_model=OrderResponse, status_code=201)
async def create_order(
    order_in: OrderCreate,
    service: OrderService = Depends(get_order_service)
):
    """Create a new order"""
    return service.create_order(order_in.description, order_in.total)

@router.post("/pay", response_model=OrderResponse, status_code=201)
async def place_order_and_pay(
    order_in: OrderPayCreate,
    service: OrderService = Depends(get_order_service)
):
    """Create an order and apply a payment to it; the order is kept if the payment fails"""
    return service.place_order_and_pay(
        order_in.description,
        order_in.total,
        order_in.payment_amount,
        order_in.note
    )

@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    service: OrderService = Depends(get_order_service)
):
    """Get an order by ID"""
    return service.get_order(order_id)
