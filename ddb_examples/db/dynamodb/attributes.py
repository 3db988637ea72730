"""Typed DynamoDB attribute values.

The low-level boto3 client speaks in single-key dicts such as ``{"S": "abc"}``
or ``{"N": "15.88"}``. This module models those as one frozen dataclass per
type tag and converts between the two shapes.

A wire value carrying several type tags (or none at all) breaks the store's
contract but can still arrive from hand-built requests or fixtures; it is kept
as :class:`Conflicting` so callers decide how to resolve it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from boto3.dynamodb.types import TypeSerializer


@dataclass(frozen=True, slots=True)
class Binary:
    value: bytes


@dataclass(frozen=True, slots=True)
class Text:
    value: str


@dataclass(frozen=True, slots=True)
class Numeric:
    # Decimal string exactly as stored; never parsed.
    value: str


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool


@dataclass(frozen=True, slots=True)
class Null:
    pass


@dataclass(frozen=True, slots=True)
class ListValue:
    items: tuple[AttributeValue, ...] = ()


@dataclass(frozen=True, slots=True)
class MapValue:
    entries: dict[str, AttributeValue] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class StringSet:
    values: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class NumberSet:
    values: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class BinarySet:
    values: tuple[bytes, ...] = ()


@dataclass(frozen=True, slots=True)
class Conflicting:
    """More than one type tag (or none) on a single value.

    ``variants`` is ordered by tag precedence: B, S, N, BOOL, NULL, L, M, SS,
    NS, BS.
    """

    variants: tuple[AttributeValue, ...] = ()


AttributeValue = Union[
    Binary,
    Text,
    Numeric,
    Boolean,
    Null,
    ListValue,
    MapValue,
    StringSet,
    NumberSet,
    BinarySet,
    Conflicting,
]

Record = dict[str, AttributeValue]

# Precedence order for multi-tag wire values.
WIRE_TAGS: tuple[str, ...] = ("B", "S", "N", "BOOL", "NULL", "L", "M", "SS", "NS", "BS")


def kind_of(value: AttributeValue) -> str:
    """Wire tag for a value, or ``"CONFLICTING"``."""
    if isinstance(value, Conflicting):
        return "CONFLICTING"
    return _TAG_BY_TYPE[type(value)]


def _single_from_wire(tag: str, raw: Any) -> AttributeValue:
    if tag == "B":
        return Binary(bytes(raw))
    if tag == "S":
        return Text(str(raw))
    if tag == "N":
        return Numeric(str(raw))
    if tag == "BOOL":
        return Boolean(bool(raw))
    if tag == "NULL":
        return Null()
    if tag == "L":
        return ListValue(tuple(from_wire(v) for v in (raw or [])))
    if tag == "M":
        return MapValue({str(k): from_wire(v) for k, v in (raw or {}).items()})
    if tag == "SS":
        return StringSet(tuple(str(v) for v in (raw or [])))
    if tag == "NS":
        return NumberSet(tuple(str(v) for v in (raw or [])))
    if tag == "BS":
        return BinarySet(tuple(bytes(v) for v in (raw or [])))
    raise ValueError(f"Unknown attribute type tag: {tag}")


def from_wire(raw: Mapping[str, Any]) -> AttributeValue:
    if not isinstance(raw, Mapping):
        raise TypeError(f"Attribute value must be a mapping, got {type(raw).__name__}")

    variants = [_single_from_wire(tag, raw[tag]) for tag in WIRE_TAGS if tag in raw]
    if len(variants) == 1:
        return variants[0]
    return Conflicting(tuple(variants))


def to_wire(value: AttributeValue) -> dict[str, Any]:
    if isinstance(value, Binary):
        return {"B": value.value}
    if isinstance(value, Text):
        return {"S": value.value}
    if isinstance(value, Numeric):
        return {"N": value.value}
    if isinstance(value, Boolean):
        return {"BOOL": value.value}
    if isinstance(value, Null):
        return {"NULL": True}
    if isinstance(value, ListValue):
        return {"L": [to_wire(v) for v in value.items]}
    if isinstance(value, MapValue):
        return {"M": {k: to_wire(v) for k, v in value.entries.items()}}
    if isinstance(value, StringSet):
        return {"SS": list(value.values)}
    if isinstance(value, NumberSet):
        return {"NS": list(value.values)}
    if isinstance(value, BinarySet):
        return {"BS": list(value.values)}
    if isinstance(value, Conflicting):
        raise ValueError("Cannot send an attribute value with conflicting type tags")
    raise TypeError(f"Not an attribute value: {type(value).__name__}")


def record_from_wire(raw: Mapping[str, Any] | None) -> Record:
    return {str(k): from_wire(v) for k, v in (raw or {}).items()}


def record_to_wire(record: Mapping[str, AttributeValue]) -> dict[str, Any]:
    return {k: to_wire(v) for k, v in record.items()}


_serializer = TypeSerializer()


def record_from_python(values: Mapping[str, Any]) -> Record:
    """Build a record from plain Python values.

    Uses boto3's ``TypeSerializer`` so the type mapping matches the SDK's
    resource layer (``int``/``Decimal`` -> N, ``bytes`` -> B, ``set`` of str -> SS,
    and so on). Floats are rejected by the serializer; pass ``Decimal`` instead.
    """
    return {k: from_wire(_serializer.serialize(v)) for k, v in values.items()}


_TAG_BY_TYPE: dict[type, str] = {
    Binary: "B",
    Text: "S",
    Numeric: "N",
    Boolean: "BOOL",
    Null: "NULL",
    ListValue: "L",
    MapValue: "M",
    StringSet: "SS",
    NumberSet: "NS",
    BinarySet: "BS",
}
