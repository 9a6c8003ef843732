from dataclasses import dataclass, field
from pathlib import Path

from edge_quick_setup import constants, distinfo


class ConfigError(ValueError):
    """Raised when the supplied flags cannot form a usable configuration."""


@dataclass(frozen=True)
class TargetPlatform:
    os: str
    arch: str
    accelerator: str = ""

    def validate(self):
        if self.os not in constants.SUPPORTED_ARCHITECTURES:
            raise ConfigError(f"Invalid OS '{self.os}'. Expected one of: linux, windows.")
        allowed = constants.SUPPORTED_ARCHITECTURES[self.os]
        if self.arch not in allowed:
            raise ConfigError(
                f"Invalid architecture '{self.arch}' for {self.os}. "
                f"Expected one of: {', '.join(allowed)}."
            )


@dataclass(frozen=True)
class SetupConfig:
    """Immutable input for one provisioning run.

    Every IAM resource name is derived from these fields, so two runs with the
    same configuration always target the same role and policies.
    """

    account: str
    region: str
    device_fleet: str
    device_name: str
    device_fleet_role: str
    device_fleet_bucket: str
    iot_thing_type: str = ""
    iot_thing_name: str = ""
    s3_folder_prefix: str = constants.DEFAULT_S3_FOLDER_PREFIX
    agent_directory: Path = field(default_factory=lambda: Path.cwd() / constants.DEFAULT_AGENT_DIRECTORY_NAME)
    target_platform: TargetPlatform = field(default_factory=lambda: TargetPlatform(distinfo.OS, distinfo.ARCH))

    @property
    def fleet_policy_name(self):
        return f"{self.device_fleet.lower()}-policy"

    @property
    def bucket_policy_name(self):
        return f"{self.device_fleet.lower()}-{self.device_fleet_bucket.lower()}-policy"

    @property
    def role_arn(self):
        return f"arn:aws:iam::{self.account}:role/{self.device_fleet_role}"

    def policy_arn(self, policy_name):
        return f"arn:aws:iam::{self.account}:policy/{policy_name}"

    def summary(self):
        """Ordered (label, value) pairs for display."""
        return [
            ("Account", self.account),
            ("Region", self.region),
            ("Device Fleet", self.device_fleet),
            ("Device Name", self.device_name),
            ("IoT Thing Type", self.iot_thing_type),
            ("IoT Thing Name", self.iot_thing_name),
            ("Device Fleet Role", self.device_fleet_role),
            ("Device Fleet Bucket", self.device_fleet_bucket),
            ("S3 Folder Prefix", self.s3_folder_prefix),
            ("Agent Directory", str(self.agent_directory)),
            ("Target OS", self.target_platform.os),
            ("Target Architecture", self.target_platform.arch),
            ("Target Accelerator", self.target_platform.accelerator or "-"),
        ]


def default_bucket_name(region, account):
    # Same naming as the SageMaker SDK's default session bucket
    return f"sagemaker-{region}-{account}"


def build_config(account, device_fleet, device_name, region=constants.DEFAULT_REGION,
                 target_os=None, target_arch=None, accelerator=None,
                 iot_thing_type=None, iot_thing_name=None, device_fleet_role=None,
                 device_fleet_bucket=None, s3_folder_prefix=None, agent_directory=None):
    """Fill in derived defaults and validate the target platform."""
    if not account or not device_fleet or not device_name:
        raise ConfigError("Missing device fleet, device name or account.")

    region = (region or constants.DEFAULT_REGION).lower()
    platform = TargetPlatform(
        os=(target_os or distinfo.OS).lower(),
        arch=(target_arch or distinfo.ARCH).lower(),
        accelerator=(accelerator or "").lower(),
    )
    platform.validate()

    return SetupConfig(
        account=account,
        region=region,
        device_fleet=device_fleet,
        device_name=device_name,
        device_fleet_role=device_fleet_role or f"Sagemaker_{device_fleet}_role",
        device_fleet_bucket=device_fleet_bucket or default_bucket_name(region, account),
        iot_thing_type=iot_thing_type or f"Sagemaker_{device_fleet}",
        iot_thing_name=iot_thing_name or f"Sagemaker_{device_name}",
        s3_folder_prefix=s3_folder_prefix or constants.DEFAULT_S3_FOLDER_PREFIX,
        agent_directory=Path(agent_directory) if agent_directory else Path.cwd() / constants.DEFAULT_AGENT_DIRECTORY_NAME,
        target_platform=platform,
    )
