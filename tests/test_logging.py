from __future__ import annotations

import json
import logging

import pytest
import structlog


@pytest.fixture
def restore_logging():
    from ddb_examples.observability import logging as logging_mod

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
    logging_mod._CONFIGURED = False


def test_json_logging_includes_run_and_operation(capsys, restore_logging):
    from ddb_examples.observability.context import operation_var, run_id_var
    from ddb_examples.observability.logging import configure_logging, get_logger

    configure_logging(level="INFO", fmt="json", force=True)
    log = get_logger("test_logging_json")

    run_token = run_id_var.set("run-abc")
    op_token = operation_var.set("Get DynamoDb Item")
    try:
        log.info("operation_result", table="SensorData")
        log.debug("attribute_dropped", attribute="Flag")
    finally:
        operation_var.reset(op_token)
        run_id_var.reset(run_token)

    lines = [ln for ln in capsys.readouterr().out.splitlines() if ln.strip()]
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["event"] == "operation_result"
    assert payload["run_id"] == "run-abc"
    assert payload["operation"] == "Get DynamoDb Item"
    assert payload["table"] == "SensorData"
    assert payload["level"] == "info"
    assert payload["logger"] == "test_logging_json"


def test_console_logging_is_plain_text(capsys, restore_logging):
    from ddb_examples.observability.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", fmt="console", force=True)
    get_logger("test_logging_console").info("examples_started", steps=5)

    out = capsys.readouterr().out
    assert "examples_started" in out
    assert "steps=5" in out
