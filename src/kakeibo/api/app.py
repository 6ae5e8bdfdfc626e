"""FastAPI application exposing the household ledger."""

import logging
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import date
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kakeibo import config
from kakeibo.api.schemas import (
    CategoryResponse,
    HealthResponse,
    MessageResponse,
    TransactionRequest,
    TransactionResponse,
)
from kakeibo.database.base import TransactionRepository
from kakeibo.database.factories import create_repository
from kakeibo.database.memory import InMemoryTransactionRepository
from kakeibo.domain.category import CategoryService
from kakeibo.domain.errors import DomainError, StoreError, ValidationError
from kakeibo.domain.transaction import TransactionService


logger = logging.getLogger(__name__)


class APIError(Exception):
    """Error carrying the HTTP status and message returned to the client."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _store_failure(context: str, exc: Exception) -> APIError:
    # Repository failures, including "not found", are reported as 500.
    return APIError(500, f"{context}: {exc}")


def get_repository(request: Request) -> TransactionRepository:
    """Return the process-wide repository."""
    return request.app.state.repository


def get_transaction_service(
    repository: TransactionRepository = Depends(get_repository),
) -> TransactionService:
    return TransactionService(repository)


def seed_sample_transaction(repository: TransactionRepository) -> None:
    """Store the sample expense shown on a fresh in-memory ledger."""
    TransactionService(repository).create_transaction(
        txn_date=date(2025, 1, 15),
        kind="expense",
        category_id=1,
        amount=1500,
        memo="Sample: lunch",
    )


def prepare_repository(repository: TransactionRepository) -> None:
    """Log the selected backend and seed the in-memory store when configured."""
    if isinstance(repository, InMemoryTransactionRepository):
        logger.info("using in-memory store (DATABASE_URL not set)")
        if config.seed_sample_data():
            seed_sample_transaction(repository)
    else:
        logger.info("connected to database")


def _build_transaction(service: TransactionService, body: TransactionRequest):
    try:
        return service.build_transaction(
            txn_date=body.date,
            kind=body.type,
            category_id=body.category_id,
            amount=body.amount,
            memo=body.memo,
        )
    except ValidationError as e:
        raise APIError(400, str(e))
    except (DomainError, StoreError) as e:
        raise _store_failure("Failed to fetch category", e)


def create_app(
    repository: Optional[TransactionRepository] = None,
    cors_origins: Optional[list[str]] = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        repository: Repository to serve. If None, one is created from
            DATABASE_URL; construction fails here if the database is
            unreachable.
        cors_origins: Allowed CORS origins. If None, read from CORS_ORIGINS.

    Returns:
        FastAPI application
    """
    if repository is None:
        config.load_env_file()
        repository = create_repository(config.database_url())
        prepare_repository(repository)

    if cors_origins is None:
        cors_origins = config.cors_origins()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.repository.close()

    app = FastAPI(title="kakeibo", lifespan=lifespan)
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept"],
    )
    logger.info("cors_origins=%s", cors_origins)

    @app.exception_handler(APIError)
    async def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        if any(error.get("loc", ())[:1] == ("path",) for error in errors):
            message = "id must be an integer"
        else:
            details = "; ".join(error.get("msg", "") for error in errors)
            message = f"Failed to parse request body: {details}"
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/api/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/api/categories", response_model=list[CategoryResponse])
    def get_categories(
        repository: TransactionRepository = Depends(get_repository),
    ) -> list[CategoryResponse]:
        try:
            categories = CategoryService(repository).list_categories()
        except (DomainError, StoreError) as e:
            raise _store_failure("Failed to fetch categories", e)
        return [CategoryResponse.from_entity(category) for category in categories]

    @app.get("/api/transactions", response_model=list[TransactionResponse])
    def get_transactions(
        service: TransactionService = Depends(get_transaction_service),
    ) -> list[TransactionResponse]:
        try:
            transactions = service.list_transactions()
        except (DomainError, StoreError) as e:
            raise _store_failure("Failed to fetch transactions", e)
        return [TransactionResponse.from_entity(txn) for txn in transactions]

    @app.post("/api/transactions", status_code=201, response_model=TransactionResponse)
    def create_transaction(
        body: TransactionRequest,
        service: TransactionService = Depends(get_transaction_service),
    ) -> TransactionResponse:
        transaction = _build_transaction(service, body)
        try:
            saved = service.repository.save(transaction)
        except (DomainError, StoreError) as e:
            raise _store_failure("Failed to save transaction", e)
        return TransactionResponse.from_entity(saved)

    @app.put("/api/transactions/{transaction_id}", response_model=TransactionResponse)
    def update_transaction(
        transaction_id: int,
        body: TransactionRequest,
        service: TransactionService = Depends(get_transaction_service),
    ) -> TransactionResponse:
        transaction = _build_transaction(service, body)
        try:
            updated = service.repository.update(replace(transaction, id=transaction_id))
        except (DomainError, StoreError) as e:
            raise _store_failure("Failed to update transaction", e)
        return TransactionResponse.from_entity(updated)

    @app.delete("/api/transactions/{transaction_id}", response_model=MessageResponse)
    def delete_transaction(
        transaction_id: int,
        service: TransactionService = Depends(get_transaction_service),
    ) -> MessageResponse:
        try:
            service.delete_transaction(transaction_id)
        except (DomainError, StoreError) as e:
            raise _store_failure("Failed to delete transaction", e)
        return MessageResponse(message="Transaction deleted")

    return app
