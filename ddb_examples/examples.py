#!/usr/bin/env python3
"""
Walk through the basic DynamoDB client calls against a live account.

The sequence is fixed:
1. List the tables in the account
2. Describe the sensor table's attribute definitions
3. Get one sensor reading by its full primary key
4. Put a document record
5. Query document records by partition key and a creation-date range

Each step logs its progress and result; a failing step is logged and the next
step still runs.

Usage:
    python -m ddb_examples [--profile NAME] [--region REGION] [--endpoint-url URL]
"""

from __future__ import annotations

import argparse
import sys
import uuid
from collections.abc import Callable, Sequence
from typing import Any

from botocore.exceptions import BotoCoreError
from pydantic import ValidationError

from .db.dynamodb.attributes import Numeric, Text
from .db.dynamodb.client import create_dynamodb_client
from .db.dynamodb.results import AttributeDefinition, OperationResult
from .db.dynamodb.store import TableStore
from .observability.context import operation_var, run_id_var
from .observability.logging import configure_logging, get_logger
from .settings import LOG_LEVELS, Settings, get_settings

log = get_logger("ddb_examples")

SENSOR_KEY = {
    "SensorId": Text("28-000006b4e9ca"),
    "EpochTime": Numeric("1606148715"),
}

DOCUMENT_ITEM = {
    "document_id": Text("1234567890"),
    "creation_date": Text("2021-02-07"),
    "customer_account_id": Text("ABCD1234"),
}

DOCUMENT_QUERY = "document_id = :document_id AND creation_date >= :creation_date"
DOCUMENT_QUERY_VALUES = {
    ":document_id": Text("1234567890"),
    ":creation_date": Text("2021-02-06"),
}


def report(result: OperationResult[Any]) -> None:
    """Log one operation outcome."""
    if result.status == "failed":
        err = result.error
        log.error(
            "operation_error",
            operation=result.operation,
            table=result.table_name,
            error=str(err),
            error_code=getattr(err, "code", None),
            aws_request_id=getattr(err, "aws_request_id", None),
        )
        return

    if result.status == "not_found":
        event = "item_not_found" if result.operation == "GetItem" else "not_found"
        log.info(event, operation=result.operation, table=result.table_name, detail=result.detail)
        return

    value: Any = result.value
    if isinstance(value, list) and value and isinstance(value[0], AttributeDefinition):
        value = [d._asdict() for d in value]
    log.info("operation_result", operation=result.operation, table=result.table_name, result=value)


def _step(title: str, fn: Callable[[], OperationResult[Any]]) -> OperationResult[Any]:
    token = operation_var.set(title)
    try:
        log.info("operation_started", example=title)
        result = fn()
        report(result)
        return result
    finally:
        operation_var.reset(token)


def run_examples(store: TableStore, settings: Settings) -> list[OperationResult[Any]]:
    sensor_table = settings.sensor_table_name
    document_table = settings.document_table_name

    steps: list[tuple[str, Callable[[], OperationResult[Any]]]] = [
        ("List DynamoDb Tables", store.list_tables),
        ("Describe DynamoDb Table", lambda: store.describe_table(sensor_table)),
        ("Get DynamoDb Item", lambda: store.get_item(sensor_table, SENSOR_KEY)),
        ("Put DynamoDb Item", lambda: store.put_item(document_table, DOCUMENT_ITEM)),
        (
            "DynamoDb Query",
            lambda: store.query(document_table, DOCUMENT_QUERY, DOCUMENT_QUERY_VALUES),
        ),
    ]

    results = [_step(title, fn) for title, fn in steps]

    failed = sum(1 for r in results if r.status == "failed")
    log.info("examples_done", steps=len(results), failed=failed)
    return results


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the DynamoDB client examples")
    parser.add_argument("--profile", type=str, help="AWS credentials profile name")
    parser.add_argument("--region", type=str, help="AWS region (default from AWS_REGION or us-east-1)")
    parser.add_argument("--endpoint-url", type=str, help="DynamoDB endpoint, e.g. DynamoDB Local")
    parser.add_argument("--sensor-table", type=str, help="Table used by the describe/get examples")
    parser.add_argument("--document-table", type=str, help="Table used by the put/query examples")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Log level (default INFO)")
    parser.add_argument("--log-format", choices=("console", "json"), help="Log output format")
    return parser.parse_args(argv)


def _settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {
        "aws_profile": args.profile,
        "aws_region": args.region,
        "ddb_endpoint_url": args.endpoint_url,
        "sensor_table_name": args.sensor_table,
        "document_table_name": args.document_table,
        "log_level": args.log_level,
        "log_format": args.log_format,
    }
    return get_settings().model_copy(update={k: v for k, v in overrides.items() if v is not None})


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        settings = _settings_from_args(args)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    configure_logging(level=settings.log_level, fmt=settings.normalized_log_format)

    token = run_id_var.set(uuid.uuid4().hex[:12])
    try:
        log.info("examples_started", settings=settings.to_log_safe_dict())
        try:
            client = create_dynamodb_client(settings)
        except (BotoCoreError, ValueError) as e:
            # botocore rejects a malformed endpoint URL with a plain ValueError.
            log.error("client_setup_failed", error=str(e))
            return 2
        results = run_examples(TableStore(client), settings)
    finally:
        run_id_var.reset(token)

    return 1 if any(r.status == "failed" for r in results) else 0


if __name__ == "__main__":
    sys.exit(main())
