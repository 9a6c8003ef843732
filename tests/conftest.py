"""Shared fixtures: fake AWS credentials, a mocked IAM client and a fixed config."""

import boto3
import pytest
from moto import mock_aws

from edge_quick_setup.config import build_config

ACCOUNT_ID = "123456789012"


@pytest.fixture(autouse=True)
def _aws_env(monkeypatch):
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-west-2")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("AWS_REGION", raising=False)


@pytest.fixture
def config():
    return build_config(
        account=ACCOUNT_ID,
        device_fleet="MyFleet",
        device_name="MyDevice",
        region="us-west-2",
        target_os="linux",
        target_arch="arm64",
        device_fleet_bucket="my-bucket",
    )


@pytest.fixture
def iam():
    with mock_aws():
        yield boto3.client("iam", region_name="us-west-2")
