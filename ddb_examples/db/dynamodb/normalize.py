from __future__ import annotations

from collections.abc import Mapping

from ...observability.logging import get_logger
from .attributes import AttributeValue, Binary, Conflicting, Numeric, Text, kind_of
from .errors import AttributeDecodeError

log = get_logger("ddb.normalize")

NormalizedRecord = dict[str, str]


def _decode_binary(payload: bytes, *, name: str | None) -> str:
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as e:
        raise AttributeDecodeError(
            message="Binary attribute is not valid UTF-8",
            attribute_name=name,
            cause=e,
        ) from e


def normalize_attribute(value: AttributeValue, *, name: str | None = None) -> str | None:
    """Display string for one attribute value.

    Binary wins over Text, which wins over Numeric; every other type yields
    None. Invalid UTF-8 in a binary payload raises AttributeDecodeError.
    """
    candidates = value.variants if isinstance(value, Conflicting) else (value,)

    for wanted in (Binary, Text, Numeric):
        for v in candidates:
            if not isinstance(v, wanted):
                continue
            if isinstance(v, Binary):
                return _decode_binary(v.value, name=name)
            return v.value

    return None


def normalize_record(record: Mapping[str, AttributeValue]) -> NormalizedRecord:
    """Normalize every attribute, dropping the ones with no display string.

    A decode failure on any attribute aborts the whole record.
    """
    out: NormalizedRecord = {}
    for name, value in record.items():
        s = normalize_attribute(value, name=name)
        if s is None:
            log.debug("attribute_dropped", attribute=name, kind=kind_of(value))
            continue
        out[name] = s
    return out
