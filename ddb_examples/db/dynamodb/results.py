from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, NamedTuple, TypeVar

from .errors import AttributeDecodeError, StoreError

T = TypeVar("T")

Status = Literal["ok", "not_found", "failed"]


class AttributeDefinition(NamedTuple):
    attribute_name: str
    attribute_type: str


@dataclass(slots=True)
class OperationResult(Generic[T]):
    """Outcome of one table-store operation.

    ``not_found`` is a successful call that found nothing; ``value`` then holds
    the empty payload for the operation (``{}`` or ``[]``).
    """

    operation: str
    status: Status
    value: T | None = None
    table_name: str | None = None
    detail: str | None = None
    error: StoreError | AttributeDecodeError | None = None

    @classmethod
    def success(cls, operation: str, value: T, *, table_name: str | None = None) -> OperationResult[T]:
        return cls(operation=operation, status="ok", value=value, table_name=table_name)

    @classmethod
    def not_found(
        cls, operation: str, value: T, *, detail: str, table_name: str | None = None
    ) -> OperationResult[T]:
        return cls(operation=operation, status="not_found", value=value, table_name=table_name, detail=detail)

    @classmethod
    def failure(
        cls,
        operation: str,
        error: StoreError | AttributeDecodeError,
        *,
        table_name: str | None = None,
    ) -> OperationResult[T]:
        return cls(operation=operation, status="failed", table_name=table_name, detail=str(error), error=error)
