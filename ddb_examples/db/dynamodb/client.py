from __future__ import annotations

import boto3
from botocore.config import Config

from ...settings import Settings, get_settings


def botocore_config(settings: Settings | None = None) -> Config:
    s = settings or get_settings()
    # Retries are left entirely to botocore; nothing above this layer retries.
    return Config(
        retries={"total_max_attempts": int(s.ddb_max_attempts), "mode": "standard"},
        connect_timeout=s.ddb_connect_timeout_s,
        read_timeout=s.ddb_read_timeout_s,
    )


def create_session(settings: Settings | None = None) -> boto3.session.Session:
    s = settings or get_settings()
    profile = (s.aws_profile or "").strip() or None
    return boto3.session.Session(profile_name=profile, region_name=s.aws_region)


def create_dynamodb_client(settings: Settings | None = None, *, session: boto3.session.Session | None = None):
    """Build a low-level DynamoDB client.

    The caller owns the returned client and passes it to whatever needs it.
    """
    s = settings or get_settings()
    sess = session or create_session(s)
    kwargs = {"config": botocore_config(s)}
    endpoint = (s.ddb_endpoint_url or "").strip()
    if endpoint:
        kwargs["endpoint_url"] = endpoint
    return sess.client("dynamodb", **kwargs)
