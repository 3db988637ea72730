from __future__ import annotations

import logging
import sys

import structlog

from .context import get_operation, get_run_id


def _add_run_context(_: logging.Logger, __: str, event_dict: dict) -> dict:
    rid = get_run_id()
    if rid:
        event_dict["run_id"] = rid
    op = get_operation()
    if op and "operation" not in event_dict:
        event_dict["operation"] = op
    return event_dict


_CONFIGURED = False


def configure_logging(*, level: str | int = "INFO", fmt: str = "console", force: bool = False) -> None:
    """
    Configure stdlib logging + structlog to write to stdout.

    ``fmt="json"`` emits one JSON object per line; anything else uses the
    human-readable console renderer.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    if isinstance(level, str):
        level = level.strip().upper() or "INFO"

    pre_chain = [
        _add_run_context,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=pre_chain,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    # botocore is chatty at DEBUG; keep it flowing through root but quieter.
    for name in ("botocore", "boto3", "urllib3"):
        log = logging.getLogger(name)
        log.handlers = []
        log.propagate = True
        log.setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            _add_run_context,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def get_logger(name: str | None = None):
    return structlog.get_logger(name)
