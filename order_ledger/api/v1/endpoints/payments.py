from fastapi import APIRouter, Depends
from order_ledger.api.deps import get_order_service
from order_ledger.schemas.order import PaymentCreate, PaymentResponse
from order_ledger.services.order_service import OrderService

router = APIRouter()

@router.post("/", response_model=PaymentResponse, status_code=201)
async def apply_payment(
    payment_in: PaymentCreate,
    service: OrderService = Depends(get_order_service)
):
    return service.apply_payment_to_order(
        payment_in.order_id,
        payment_in.amount,
        payment_in.note
    )
