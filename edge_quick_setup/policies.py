"""IAM policy documents for the device fleet role and its two managed policies."""

from __future__ import annotations

import json
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from edge_quick_setup import constants
from edge_quick_setup.config import SetupConfig


class Principal(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    service: str = Field(alias="Service")


class Statement(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sid: str | None = Field(default=None, alias="Sid")
    effect: str = Field(default="Allow", alias="Effect")
    action: tuple[str, ...] = Field(alias="Action")
    resource: tuple[str, ...] | None = Field(default=None, alias="Resource")
    condition: dict | None = Field(default=None, alias="Condition")
    principal: Principal | None = Field(default=None, alias="Principal")


class PolicyDocument(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str = Field(default=constants.POLICY_VERSION, alias="Version")
    statement: tuple[Statement, ...] = Field(alias="Statement")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=1)


@dataclass(frozen=True)
class PolicySpec:
    """Everything needed to look up or create one customer managed policy."""

    name: str
    arn: str
    description: str
    document: PolicyDocument


def trust_policy() -> PolicyDocument:
    """Lets IoT credentials and SageMaker assume the device fleet role."""
    return PolicyDocument(Statement=(
        Statement(
            Principal=Principal(Service=constants.IOT_CREDENTIALS_SERVICE),
            Action=("sts:AssumeRole",),
        ),
        Statement(
            Principal=Principal(Service=constants.SAGEMAKER_SERVICE),
            Action=("sts:AssumeRole",),
        ),
    ))


def bucket_policy_document(config: SetupConfig) -> PolicyDocument:
    bucket = config.device_fleet_bucket
    return PolicyDocument(Statement=(
        Statement(
            Sid="DeviceS3Access",
            Action=("s3:PutObject", "s3:GetBucketLocation"),
            Resource=(f"arn:aws:s3:::{bucket}/*", f"arn:aws:s3:::{bucket}"),
        ),
    ))


def fleet_policy_document(config: SetupConfig) -> PolicyDocument:
    fleet_arn = f"arn:aws:sagemaker:{config.region}:{config.account}:device-fleet/{config.device_fleet.lower()}"
    role_alias_arn = f"arn:aws:iot:{config.region}:{config.account}:rolealias/SageMakerEdge-{config.device_fleet}"

    return PolicyDocument(Statement=(
        Statement(
            Sid="SageMakerEdgeApis",
            Action=("sagemaker:SendHeartbeat", "sagemaker:GetDeviceRegistration"),
            Resource=(f"{fleet_arn}/device/*", fleet_arn),
        ),
        Statement(
            Sid="CreateIOTRoleAlias",
            Action=(
                "iot:CreateRoleAlias",
                "iot:DescribeRoleAlias",
                "iot:UpdateRoleAlias",
                "iot:ListTagsForResource",
                "iot:TagResource",
            ),
            Resource=(role_alias_arn,),
        ),
        Statement(
            Sid="CreateIoTRoleAliasIamPermissionsGetRole",
            Action=("iam:GetRole",),
            Resource=(config.role_arn,),
        ),
        Statement(
            Sid="CreateIoTRoleAliasIamPermissionsPassRole",
            Action=("iam:PassRole",),
            Resource=(config.role_arn,),
            Condition={
                "StringEqualsIfExists": {
                    "iam:PassedToService": [
                        constants.IOT_SERVICE,
                        constants.IOT_CREDENTIALS_SERVICE,
                    ]
                }
            },
        ),
    ))


def fleet_policy_spec(config: SetupConfig) -> PolicySpec:
    name = config.fleet_policy_name
    return PolicySpec(
        name=name,
        arn=config.policy_arn(name),
        description=f"SageMaker device fleet policy for {config.device_fleet}",
        document=fleet_policy_document(config),
    )


def bucket_policy_spec(config: SetupConfig) -> PolicySpec:
    name = config.bucket_policy_name
    return PolicySpec(
        name=name,
        arn=config.policy_arn(name),
        description=f"SageMaker device fleet bucket policy for {config.device_fleet}",
        document=bucket_policy_document(config),
    )
