from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest
from botocore.exceptions import ClientError

# Ensure the repo root is on sys.path so `import ddb_examples` works without installing.
ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT_DIR))


def client_error(code: str, message: str, operation: str, request_id: str = "REQ123") -> ClientError:
    return ClientError(
        {
            "Error": {"Code": code, "Message": message},
            "ResponseMetadata": {"RequestId": request_id, "HTTPStatusCode": 400},
        },
        operation,
    )


class FakeDynamoClient:
    """Stands in for a boto3 DynamoDB client.

    ``responses`` maps a method name to either a response dict or an exception
    to raise. Every call is recorded in ``calls``.
    """

    def __init__(self, responses: dict[str, Any] | None = None):
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def _respond(self, method: str, kwargs: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((method, kwargs))
        resp = self.responses.get(method, {})
        if isinstance(resp, Exception):
            raise resp
        return resp

    def list_tables(self, **kwargs):
        return self._respond("list_tables", kwargs)

    def describe_table(self, **kwargs):
        return self._respond("describe_table", kwargs)

    def get_item(self, **kwargs):
        return self._respond("get_item", kwargs)

    def put_item(self, **kwargs):
        return self._respond("put_item", kwargs)

    def query(self, **kwargs):
        return self._respond("query", kwargs)


@pytest.fixture
def fake_client() -> FakeDynamoClient:
    return FakeDynamoClient()
