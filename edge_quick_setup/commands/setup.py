import sys
from pathlib import Path

import boto3
import click
from botocore.exceptions import BotoCoreError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from edge_quick_setup import constants
from edge_quick_setup.config import ConfigError, build_config
from edge_quick_setup.errors import ProvisioningError
from edge_quick_setup.iam import provision

console = Console()


def open_iam_client(profile, region):
    try:
        session = boto3.Session(profile_name=profile, region_name=region)
        return session.client('iam')
    except BotoCoreError as e:
        raise ProvisioningError("open session for profile", profile or "default", e) from e


def print_config(config):
    table = Table(box=box.ROUNDED, show_header=False, title="Device Setup")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="yellow")
    for label, value in config.summary():
        table.add_row(label, value)
    console.print(table)


@click.command()
@click.option('--account', '-a', required=True, help='AWS account ID')
@click.option('--region', '-r', default=constants.DEFAULT_REGION, envvar='AWS_REGION', show_default=True, help='AWS Region')
@click.option('--device-fleet', '-f', required=True, help='Name of the device fleet')
@click.option('--device-name', '-d', required=True, help='Name of the device')
@click.option('--os', 'target_os', help='Target operating system (defaults to this host)')
@click.option('--arch', 'target_arch', help='Target architecture (defaults to this host)')
@click.option('--accelerator', help='Target accelerator')
@click.option('--iot-thing-type', help='IoT thing type for the device (default: Sagemaker_<fleet>)')
@click.option('--iot-thing-name', help='IoT thing name for the device (default: Sagemaker_<device>)')
@click.option('--device-fleet-role', help='Role for the device fleet (default: Sagemaker_<fleet>_role)')
@click.option('--device-fleet-bucket', help='Bucket for device data (default: sagemaker-<region>-<account>)')
@click.option('--s3-folder-prefix', default=constants.DEFAULT_S3_FOLDER_PREFIX, show_default=True, help='S3 prefix for captured data')
@click.option('--agent-directory', type=click.Path(file_okay=False, path_type=Path), help='Local path to store the agent (default: ./demo-agent)')
@click.option('--profile', '-p', envvar='AWS_PROFILE', help='AWS credentials profile')
def setup(account, region, device_fleet, device_name, target_os, target_arch, accelerator,
          iot_thing_type, iot_thing_name, device_fleet_role, device_fleet_bucket,
          s3_folder_prefix, agent_directory, profile):
    """Create the IAM role and policies a SageMaker Edge device fleet needs."""
    try:
        config = build_config(
            account=account,
            device_fleet=device_fleet,
            device_name=device_name,
            region=region,
            target_os=target_os,
            target_arch=target_arch,
            accelerator=accelerator,
            iot_thing_type=iot_thing_type,
            iot_thing_name=iot_thing_name,
            device_fleet_role=device_fleet_role,
            device_fleet_bucket=device_fleet_bucket,
            s3_folder_prefix=s3_folder_prefix,
            agent_directory=agent_directory,
        )
    except ConfigError as e:
        raise click.UsageError(str(e))

    print_config(config)

    try:
        iam = open_iam_client(profile, config.region)
        with console.status("Provisioning IAM role and policies..."):
            role = provision(iam, config)
    except ProvisioningError as e:
        console.print(f"[bold red]Setup Failed:[/bold red] {escape(str(e))}")
        sys.exit(1)

    console.print(Panel(
        f"Role: [bold cyan]{role.name}[/bold cyan]\n"
        f"ARN: [green]{role.arn}[/green]",
        title="IAM Setup Complete", border_style="green", expand=False
    ))
