"""Provisioning commands for Lanzo."""

import json

import click

from ...helpers import fail
from ....core.config import Settings
from ....core.provisioner import Provisioner
from ....services.exceptions import LanzoError


def get_provisioner() -> Provisioner:
    settings = Settings.from_env()
    return Provisioner(settings.terraform_root, image=settings.terraform_image)


@click.group()
def provision():
    """Provision infrastructure with Terraform"""
    pass


@provision.command()
@click.argument('name')
def deploy(name):
    """Run terraform init and apply for NAME"""
    provisioner = get_provisioner()
    try:
        outputs = provisioner.deploy(name)
    except LanzoError as e:
        fail(e)

    click.echo(json.dumps(outputs, indent=2))
    click.echo("Deployment completed successfully")


@provision.command()
@click.argument('name')
def destroy(name):
    """Run terraform destroy for NAME"""
    provisioner = get_provisioner()
    try:
        output = provisioner.destroy(name)
    except LanzoError as e:
        fail(e)

    click.echo(output)
    click.echo("Resources destroyed successfully")
