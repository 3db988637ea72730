from __future__ import annotations

from functools import lru_cache
from typing import Literal, get_args

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    # Runtime
    environment: str = Field(default="development", validation_alias="APP_ENV")

    # AWS session
    aws_region: str = Field(default="us-east-1", validation_alias="AWS_REGION")
    # Named profile from ~/.aws/credentials; unset means the default provider chain.
    aws_profile: str | None = Field(default=None, validation_alias="AWS_PROFILE")

    # DynamoDB client
    # Point at DynamoDB Local (e.g. http://localhost:8000) for offline runs.
    ddb_endpoint_url: str | None = Field(default=None, validation_alias="DDB_ENDPOINT_URL")
    ddb_connect_timeout_s: float = Field(default=2, validation_alias="DDB_CONNECT_TIMEOUT_S")
    ddb_read_timeout_s: float = Field(default=10, validation_alias="DDB_READ_TIMEOUT_S")
    # Total botocore attempts per call, first try included; 1 disables retries.
    # The examples never retry on their own.
    ddb_max_attempts: int = Field(default=3, ge=1, validation_alias="DDB_MAX_ATTEMPTS")

    # Example tables
    sensor_table_name: str = Field(default="SensorData", validation_alias="SENSOR_TABLE_NAME")
    document_table_name: str = Field(default="credit_card", validation_alias="DOCUMENT_TABLE_NAME")

    # Logging
    log_level: LogLevel = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: str = Field(default="console", validation_alias="LOG_FORMAT")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    # ---- helpers / derived flags ----
    @property
    def normalized_environment(self) -> str:
        v = (self.environment or "").strip().lower()
        if v in ("prod", "production"):
            return "production"
        if v in ("dev", "development"):
            return "development"
        return v or "development"

    @property
    def normalized_log_format(self) -> str:
        v = (self.log_format or "").strip().lower()
        return "json" if v == "json" else "console"

    def to_log_safe_dict(self) -> dict[str, object]:
        """
        A redacted representation safe for structured logs.
        """
        def _has(v: object) -> bool:
            return v is not None and str(v).strip() != ""

        return {
            "environment": self.normalized_environment,
            "aws": {
                "aws_region": self.aws_region,
                "aws_profile_configured": _has(self.aws_profile),
            },
            "dynamodb": {
                "endpoint_url": self.ddb_endpoint_url if _has(self.ddb_endpoint_url) else None,
                "connect_timeout_s": self.ddb_connect_timeout_s,
                "read_timeout_s": self.ddb_read_timeout_s,
                "max_attempts": self.ddb_max_attempts,
            },
            "tables": {
                "sensor_table_name": self.sensor_table_name,
                "document_table_name": self.document_table_name,
            },
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
