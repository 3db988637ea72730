from __future__ import annotations


def test_settings_read_from_environment(monkeypatch):
    from ddb_examples.settings import Settings

    monkeypatch.setenv("AWS_REGION", "eu-central-1")
    monkeypatch.setenv("AWS_PROFILE", "jwh")
    monkeypatch.setenv("SENSOR_TABLE_NAME", "Sensors")
    monkeypatch.setenv("LOG_FORMAT", "JSON")

    s = Settings()
    assert s.aws_region == "eu-central-1"
    assert s.aws_profile == "jwh"
    assert s.sensor_table_name == "Sensors"
    assert s.document_table_name == "credit_card"
    assert s.normalized_log_format == "json"


def test_log_safe_dict_hides_profile_name(monkeypatch):
    from ddb_examples.settings import Settings

    monkeypatch.setenv("AWS_PROFILE", "secret-profile")
    d = Settings().to_log_safe_dict()
    assert d["aws"]["aws_profile_configured"] is True
    assert "secret-profile" not in repr(d)


def test_client_uses_endpoint_and_botocore_retries(monkeypatch):
    from ddb_examples.db.dynamodb import client as client_mod
    from ddb_examples.settings import Settings

    captured: dict = {}

    class _FakeSession:
        def client(self, service_name, **kwargs):
            captured["service"] = service_name
            captured.update(kwargs)
            return object()

    settings = Settings().model_copy(
        update={"ddb_endpoint_url": "http://localhost:8000", "ddb_max_attempts": 5, "ddb_read_timeout_s": 3}
    )
    client_mod.create_dynamodb_client(settings, session=_FakeSession())

    assert captured["service"] == "dynamodb"
    assert captured["endpoint_url"] == "http://localhost:8000"
    cfg = captured["config"]
    assert cfg.retries == {"total_max_attempts": 5, "mode": "standard"}
    assert cfg.read_timeout == 3


def test_session_uses_profile_and_region(monkeypatch):
    from ddb_examples.db.dynamodb import client as client_mod
    from ddb_examples.settings import Settings

    captured: dict = {}

    def _fake_session(**kwargs):
        captured.update(kwargs)
        return object()

    monkeypatch.setattr(client_mod.boto3.session, "Session", _fake_session)

    client_mod.create_session(Settings().model_copy(update={"aws_profile": "jwh", "aws_region": "us-east-1"}))
    assert captured == {"profile_name": "jwh", "region_name": "us-east-1"}

    client_mod.create_session(Settings().model_copy(update={"aws_profile": "  ", "aws_region": "us-west-2"}))
    assert captured == {"profile_name": None, "region_name": "us-west-2"}


def test_single_attempt_disables_sdk_retries():
    from ddb_examples.db.dynamodb.client import botocore_config
    from ddb_examples.settings import Settings

    cfg = botocore_config(Settings().model_copy(update={"ddb_max_attempts": 1}))
    assert cfg.retries["total_max_attempts"] == 1
    assert "max_attempts" not in cfg.retries


def test_zero_attempts_is_rejected(monkeypatch):
    import pytest
    from pydantic import ValidationError

    from ddb_examples.settings import Settings

    monkeypatch.setenv("DDB_MAX_ATTEMPTS", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_log_level_is_validated_and_uppercased(monkeypatch):
    import pytest
    from pydantic import ValidationError

    from ddb_examples.settings import Settings

    monkeypatch.setenv("LOG_LEVEL", " warning ")
    assert Settings().log_level == "WARNING"

    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings()
