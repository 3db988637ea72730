from __future__ import annotations

from typing import Callable, TypeVar

from botocore.exceptions import BotoCoreError, ClientError

from .errors import StoreError

T = TypeVar("T")


def _aws_request_id_from_client_error(e: ClientError) -> str | None:
    return ((e.response or {}).get("ResponseMetadata") or {}).get("RequestId")


def _error_from_client_error(e: ClientError) -> tuple[str | None, str]:
    err = (e.response or {}).get("Error") or {}
    code = err.get("Code") or None
    message = err.get("Message") or str(e)
    return code, message


def map_store_error(*, operation: str, table_name: str | None, exc: Exception) -> StoreError:
    if isinstance(exc, StoreError):
        return exc

    if isinstance(exc, ClientError):
        code, message = _error_from_client_error(exc)
        return StoreError(
            message=message,
            code=code,
            operation=operation,
            table_name=table_name,
            aws_request_id=_aws_request_id_from_client_error(exc),
            cause=exc,
        )

    # Network, credential and parameter validation failures raised by botocore itself.
    return StoreError(
        message=str(exc) or type(exc).__name__,
        code=type(exc).__name__,
        operation=operation,
        table_name=table_name,
        cause=exc,
    )


def ddb_call(operation: str, fn: Callable[[], T], *, table_name: str | None = None) -> T:
    """Run one store call, translating SDK failures into StoreError.

    Exactly one attempt is made here; retrying is botocore's business.
    """
    try:
        return fn()
    except (ClientError, BotoCoreError) as e:
        raise map_store_error(operation=operation, table_name=table_name, exc=e) from e
