"""Request and response bodies for the HTTP API."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, StrictInt

from kakeibo.domain.entities import Category, Transaction


class TransactionRequest(BaseModel):
    """Body of POST /api/transactions and PUT /api/transactions/{id}.

    Missing fields fall back to empty values and are then rejected by the
    domain validation, so a body without ``type`` or ``date`` yields a 400.
    Integer fields accept JSON integers only; strings, floats and booleans
    are rejected before the repository is called.
    """

    date: str = ""
    type: str = ""
    category_id: StrictInt = 0
    amount: StrictInt = 0
    memo: str = ""


class CategoryResponse(BaseModel):
    id: int
    name: str

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResponse":
        return cls(id=category.id, name=category.name)


class TransactionResponse(BaseModel):
    id: Optional[int]
    date: date
    type: str
    category_id: int
    amount: int
    memo: str
    created_at: Optional[datetime]
    category: Optional[CategoryResponse]

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            date=transaction.date,
            type=transaction.kind.value,
            category_id=transaction.category_id,
            amount=transaction.amount,
            memo=transaction.memo,
            created_at=transaction.created_at,
            category=(
                CategoryResponse.from_entity(transaction.category)
                if transaction.category is not None
                else None
            ),
        )


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
