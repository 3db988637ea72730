"""DynamoDB helpers for the examples.

This package centralizes:
- boto3 session/client construction
- typed attribute values and their wire conversion
- display-string normalization of records
- store error mapping and per-operation result values
"""

from .attributes import (
    AttributeValue,
    Binary,
    BinarySet,
    Boolean,
    Conflicting,
    ListValue,
    MapValue,
    Null,
    NumberSet,
    Numeric,
    Record,
    StringSet,
    Text,
    record_from_python,
)
from .errors import AttributeDecodeError, StoreError
from .normalize import NormalizedRecord, normalize_attribute, normalize_record
from .results import AttributeDefinition, OperationResult
from .store import TableStore

__all__ = [
    "AttributeDecodeError",
    "AttributeDefinition",
    "AttributeValue",
    "Binary",
    "BinarySet",
    "Boolean",
    "Conflicting",
    "ListValue",
    "MapValue",
    "NormalizedRecord",
    "Null",
    "NumberSet",
    "Numeric",
    "OperationResult",
    "Record",
    "StoreError",
    "StringSet",
    "TableStore",
    "Text",
    "normalize_attribute",
    "normalize_record",
    "record_from_python",
]
