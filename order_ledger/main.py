from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from order_ledger.api.errors import ledger_error_handler
from order_ledger.api.v1.api import api_router
from order_ledger.core.config import settings
from order_ledger.core.errors import LedgerError
from order_ledger.core.logging import get_logger, setup_logging
from order_ledger.repositories.ledger_repo import LedgerStore
from order_ledger.services.order_service import OrderService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    app.state.order_service = OrderService(LedgerStore())
    logger.info("ledger_started", environment=settings.ENVIRONMENT)
    yield
    logger.info("ledger_stopped", orders=len(app.state.order_service.store))


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.DESCRIPTION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(LedgerError, ledger_error_handler)

@app.get("/")
async def root():
    return {"message": "Welcome to the Order Ledger API"}

@app.get("/health")
async def health():
    return {"status": "ok", "orders": len(app.state.order_service.store)}

app.include_router(api_router, prefix=settings.API_V1_STR)
