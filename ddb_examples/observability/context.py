from __future__ import annotations

from contextvars import ContextVar

run_id_var: ContextVar[str | None] = ContextVar("run_id", default=None)
operation_var: ContextVar[str | None] = ContextVar("operation", default=None)


def get_run_id() -> str | None:
    return run_id_var.get()


def get_operation() -> str | None:
    return operation_var.get()
