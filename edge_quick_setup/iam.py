"""Get-or-create provisioning of the device fleet role and policies.

Every function takes an IAM client (``boto3.client('iam')`` or anything with
the same methods). Lookups that fail with ``NoSuchEntity`` trigger creation;
any other failure is raised as ``ProvisioningError`` and nothing further is
attempted.
"""

import logging
from dataclasses import dataclass

from botocore.exceptions import BotoCoreError, ClientError

from edge_quick_setup import constants
from edge_quick_setup.errors import ProvisioningError, is_not_found
from edge_quick_setup.policies import bucket_policy_spec, fleet_policy_spec, trust_policy

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Role:
    name: str
    arn: str

    @classmethod
    def from_response(cls, role):
        return cls(name=role['RoleName'], arn=role['Arn'])


def ensure_resource(kind, name, lookup, create):
    """Return ``lookup()``, or ``create()`` when the lookup reports NotFound."""
    try:
        resource = lookup()
    except ClientError as e:
        if not is_not_found(e):
            raise ProvisioningError(f"get {kind}", name, e) from e
        log.info("%s %s does not exist, creating it", kind.capitalize(), name)
    except BotoCoreError as e:
        raise ProvisioningError(f"get {kind}", name, e) from e
    else:
        log.info("%s %s already exists", kind.capitalize(), name)
        return resource

    try:
        return create()
    except (ClientError, BotoCoreError) as e:
        raise ProvisioningError(f"create {kind}", name, e) from e


def ensure_role(iam, role_name):
    return ensure_resource(
        'role',
        role_name,
        lambda: iam.get_role(RoleName=role_name)['Role'],
        lambda: iam.create_role(
            RoleName=role_name,
            AssumeRolePolicyDocument=trust_policy().to_json(),
        )['Role'],
    )


def ensure_policy(iam, spec):
    """Existing policies are returned as-is, their document is not compared."""
    return ensure_resource(
        'policy',
        spec.name,
        lambda: iam.get_policy(PolicyArn=spec.arn)['Policy'],
        lambda: iam.create_policy(
            PolicyName=spec.name,
            Path=constants.POLICY_PATH,
            Description=spec.description,
            PolicyDocument=spec.document.to_json(),
        )['Policy'],
    )


def is_policy_attached(iam, role_name, policy_name):
    params = {'RoleName': role_name, 'MaxItems': constants.ATTACHED_POLICIES_PAGE_SIZE}

    while True:
        try:
            page = iam.list_attached_role_policies(**params)
        except (ClientError, BotoCoreError) as e:
            raise ProvisioningError("list attached policies of role", role_name, e) from e

        if any(p['PolicyName'] == policy_name for p in page.get('AttachedPolicies', [])):
            return True

        if not page.get('IsTruncated'):
            return False
        params['Marker'] = page['Marker']


def attach_policy(iam, role, policy_arn):
    try:
        iam.attach_role_policy(RoleName=role.name, PolicyArn=policy_arn)
    except (ClientError, BotoCoreError) as e:
        raise ProvisioningError(f"attach policy {policy_arn} to role", role.name, e) from e


def provision(iam, config):
    """Bring the role and both policies to the attached end state."""
    role = Role.from_response(ensure_role(iam, config.device_fleet_role))

    policies = [
        ('device fleet', ensure_policy(iam, fleet_policy_spec(config))),
        ('device fleet bucket', ensure_policy(iam, bucket_policy_spec(config))),
    ]

    for label, policy in policies:
        if is_policy_attached(iam, role.name, policy['PolicyName']):
            log.info("The %s policy %s is already attached to %s", label, policy['PolicyName'], role.name)
            continue
        log.info("Attaching %s policy %s to %s", label, policy['PolicyName'], role.name)
        attach_policy(iam, role, policy['Arn'])

    return role
