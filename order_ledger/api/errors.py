from fastapi import Request, status
from fastapi.responses import JSONResponse

from order_ledger.core.errors import (
    AllocationExhausted,
    DuplicateId,
    InvalidInput,
    LedgerError,
    NoBalanceDue,
    OrderNotFound,
    PaymentExceedsBalance,
)
from order_ledger.core.logging import get_logger
from order_ledger.schemas.order import LedgerErrorResponse

logger = get_logger(__name__)

STATUS_BY_ERROR = [
    (InvalidInput, status.HTTP_400_BAD_REQUEST),
    (OrderNotFound, status.HTTP_404_NOT_FOUND),
    (NoBalanceDue, status.HTTP_409_CONFLICT),
    (PaymentExceedsBalance, status.HTTP_409_CONFLICT),
    (DuplicateId, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (AllocationExhausted, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: LedgerError) -> int:
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    code = status_for(exc)
    if code >= 500:
        logger.error("ledger_error", error=type(exc).__name__, detail=exc.message, path=request.url.path)
    body = LedgerErrorResponse(
        detail=exc.message,
        error=type(exc).__name__,
        order_id=exc.order_id
    )
    return JSONResponse(status_code=code, content=body.model_dump(by_alias=True))
