"""Tests for edge_quick_setup/config.py."""

from pathlib import Path

import pytest

from edge_quick_setup.config import ConfigError, TargetPlatform, build_config


class TestBuildConfig:
    def test_defaults(self):
        config = build_config(
            account="123456789012",
            device_fleet="MyFleet",
            device_name="Cam01",
            region="US-WEST-2",
            target_os="Linux",
            target_arch="X86_64",
        )
        assert config.region == "us-west-2"
        assert config.device_fleet_role == "Sagemaker_MyFleet_role"
        assert config.device_fleet_bucket == "sagemaker-us-west-2-123456789012"
        assert config.iot_thing_type == "Sagemaker_MyFleet"
        assert config.iot_thing_name == "Sagemaker_Cam01"
        assert config.s3_folder_prefix == "demo"
        assert config.agent_directory == Path.cwd() / "demo-agent"
        assert config.target_platform == TargetPlatform("linux", "x86_64", "")

    def test_overrides(self):
        config = build_config(
            account="123456789012",
            device_fleet="MyFleet",
            device_name="Cam01",
            target_os="windows",
            target_arch="i386",
            device_fleet_role="custom-role",
            device_fleet_bucket="my-bucket",
            iot_thing_name="thing-1",
            agent_directory="/opt/agent",
        )
        assert config.device_fleet_role == "custom-role"
        assert config.device_fleet_bucket == "my-bucket"
        assert config.iot_thing_name == "thing-1"
        assert config.agent_directory == Path("/opt/agent")

    @pytest.mark.parametrize("missing", ["account", "device_fleet", "device_name"])
    def test_missing_required(self, missing):
        args = {"account": "123456789012", "device_fleet": "f", "device_name": "d",
                "target_os": "linux", "target_arch": "arm64"}
        args[missing] = ""
        with pytest.raises(ConfigError, match="Missing"):
            build_config(**args)

    def test_derived_names_are_lowercased(self, config):
        assert config.fleet_policy_name == "myfleet-policy"
        assert config.bucket_policy_name == "myfleet-my-bucket-policy"
        assert config.role_arn == "arn:aws:iam::123456789012:role/Sagemaker_MyFleet_role"

    def test_frozen(self, config):
        with pytest.raises(AttributeError):
            config.account = "000000000000"


class TestTargetPlatform:
    @pytest.mark.parametrize("os_name,arch", [
        ("linux", "arm64"), ("linux", "armv8"), ("linux", "x86_64"),
        ("windows", "amd64"), ("windows", "i386"), ("windows", "x86"),
    ])
    def test_valid(self, os_name, arch):
        TargetPlatform(os_name, arch).validate()

    def test_invalid_os(self):
        with pytest.raises(ConfigError, match="Invalid OS"):
            TargetPlatform("darwin", "arm64").validate()

    @pytest.mark.parametrize("os_name,arch", [("linux", "i386"), ("windows", "arm64")])
    def test_invalid_arch(self, os_name, arch):
        with pytest.raises(ConfigError, match="Invalid architecture"):
            TargetPlatform(os_name, arch).validate()
