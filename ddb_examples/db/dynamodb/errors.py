from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class StoreError(Exception):
    """Failure reported by DynamoDB or the AWS SDK.

    ``message`` is the store's own message. ``code`` is recorded when the store
    supplied one but is never used to branch on: a StoreError is surfaced as-is
    and never retried by this package.
    """

    message: str
    code: str | None = None
    operation: str | None = None
    table_name: str | None = None
    aws_request_id: str | None = None
    cause: Exception | None = None

    def __str__(self) -> str:
        if self.code:
            return f"{self.code}: {self.message}"
        return self.message


@dataclass(slots=True)
class AttributeDecodeError(Exception):
    """A binary attribute payload is not valid UTF-8."""

    message: str
    attribute_name: str | None = None
    cause: Exception | None = None

    def __str__(self) -> str:
        if self.attribute_name:
            return f"{self.message} (attribute {self.attribute_name!r})"
        return self.message
