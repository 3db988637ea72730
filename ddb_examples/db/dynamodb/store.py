from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .attributes import AttributeValue, record_from_wire, record_to_wire
from .calls import ddb_call
from .errors import AttributeDecodeError, StoreError
from .normalize import NormalizedRecord, normalize_record
from .results import AttributeDefinition, OperationResult


class TableStore:
    """Thin facade over a low-level DynamoDB client.

    Every method makes a single store call and returns an OperationResult;
    store failures never escape as exceptions.
    """

    def __init__(self, client: Any):
        self._client = client

    def list_tables(self) -> OperationResult[list[str]]:
        op = "ListTables"
        try:
            resp = ddb_call(op, lambda: self._client.list_tables())
        except StoreError as e:
            return OperationResult.failure(op, e)

        names = [str(n) for n in (resp.get("TableNames") or [])]
        if not names:
            return OperationResult.not_found(op, [], detail="no tables")
        return OperationResult.success(op, names)

    def describe_table(self, table_name: str) -> OperationResult[list[AttributeDefinition]]:
        op = "DescribeTable"
        try:
            resp = ddb_call(op, lambda: self._client.describe_table(TableName=table_name), table_name=table_name)
        except StoreError as e:
            return OperationResult.failure(op, e, table_name=table_name)

        table = resp.get("Table")
        if not isinstance(table, dict):
            return OperationResult.not_found(op, [], detail="no table description", table_name=table_name)

        defs_raw = table.get("AttributeDefinitions")
        if not defs_raw:
            return OperationResult.not_found(op, [], detail="no attribute definitions", table_name=table_name)

        defs = [
            AttributeDefinition(str(d.get("AttributeName")), str(d.get("AttributeType")))
            for d in defs_raw
        ]
        return OperationResult.success(op, defs, table_name=table_name)

    def get_item(
        self, table_name: str, key: Mapping[str, AttributeValue]
    ) -> OperationResult[NormalizedRecord]:
        op = "GetItem"
        wire_key = record_to_wire(key)
        try:
            resp = ddb_call(
                op,
                lambda: self._client.get_item(TableName=table_name, Key=wire_key),
                table_name=table_name,
            )
        except StoreError as e:
            return OperationResult.failure(op, e, table_name=table_name)

        item = resp.get("Item")
        if item is None:
            return OperationResult.not_found(op, {}, detail="no item found", table_name=table_name)

        try:
            normalized = normalize_record(record_from_wire(item))
        except AttributeDecodeError as e:
            return OperationResult.failure(op, e, table_name=table_name)
        return OperationResult.success(op, normalized, table_name=table_name)

    def put_item(self, table_name: str, item: Mapping[str, AttributeValue]) -> OperationResult[bool]:
        op = "PutItem"
        wire_item = record_to_wire(item)
        try:
            ddb_call(
                op,
                lambda: self._client.put_item(TableName=table_name, Item=wire_item),
                table_name=table_name,
            )
        except StoreError as e:
            return OperationResult.failure(op, e, table_name=table_name)
        return OperationResult.success(op, True, table_name=table_name)

    def query(
        self,
        table_name: str,
        key_condition_expression: str,
        expression_attribute_values: Mapping[str, AttributeValue],
    ) -> OperationResult[list[NormalizedRecord]]:
        op = "Query"
        wire_values = record_to_wire(expression_attribute_values)
        try:
            resp = ddb_call(
                op,
                lambda: self._client.query(
                    TableName=table_name,
                    KeyConditionExpression=key_condition_expression,
                    ExpressionAttributeValues=wire_values,
                ),
                table_name=table_name,
            )
        except StoreError as e:
            return OperationResult.failure(op, e, table_name=table_name)

        try:
            records = [normalize_record(record_from_wire(it)) for it in (resp.get("Items") or [])]
        except AttributeDecodeError as e:
            return OperationResult.failure(op, e, table_name=table_name)
        return OperationResult.success(op, records, table_name=table_name)
