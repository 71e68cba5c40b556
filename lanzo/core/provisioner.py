"""Infrastructure provisioning through a throwaway Terraform container."""

import logging
from pathlib import Path
from typing import Dict, Optional

from ..services.docker_service import DockerService
from ..services.exceptions import InvalidProvisioningTargetError, ProvisioningFailedError
from .constants import (
    TERRAFORM_COMMANDS,
    TERRAFORM_ENV,
    TERRAFORM_IMAGE,
    TERRAFORM_WORKDIR,
)

logger = logging.getLogger(__name__)


class Provisioner:
    """Runs Terraform commands against ``<terraform_root>/<name>``."""

    def __init__(
        self,
        terraform_root: Path,
        image: str = TERRAFORM_IMAGE,
        engine: Optional[DockerService] = None,
    ):
        self.terraform_root = Path(terraform_root)
        self.image = image
        self.engine = engine or DockerService()

    def target_path(self, name: str) -> Path:
        """Directory holding the Terraform files for ``name``."""
        path = (self.terraform_root / name).resolve()
        if path.parent != self.terraform_root.resolve() or not path.is_dir():
            raise InvalidProvisioningTargetError(f"Invalid or missing provisioning directory: '{name}'")
        return path

    def run_command(self, path: Path, command_type: str) -> str:
        """Run one Terraform command in a fresh container and return its logs.

        Raises:
            ValueError: If ``command_type`` is not init, apply or destroy
            ProvisioningFailedError: If Terraform exits with a non-zero code
        """
        if command_type not in TERRAFORM_COMMANDS:
            raise ValueError(f"Invalid command type: {command_type}")

        # The engine may live on another OS; always hand it forward slashes.
        host_path = str(path).replace('\\', '/')
        logger.info(f"Running terraform {command_type} in {host_path}")
        container = self.engine.run_container(
            self.image,
            command=TERRAFORM_COMMANDS[command_type],
            environment=list(TERRAFORM_ENV),
            volumes=[f"{host_path}:{TERRAFORM_WORKDIR}"],
            working_dir=TERRAFORM_WORKDIR,
        )

        try:
            exit_code = self.engine.wait_container(container)
            logs = self.engine.container_logs(container)
        finally:
            self.engine.remove_container(container)

        if exit_code != 0:
            raise ProvisioningFailedError(command_type, exit_code, logs)
        return logs

    def deploy(self, name: str) -> Dict[str, str]:
        """Initialize and apply the Terraform configuration for ``name``."""
        path = self.target_path(name)
        init_output = self.run_command(path, 'init')
        apply_output = self.run_command(path, 'apply')
        return {'init': init_output, 'apply': apply_output}

    def destroy(self, name: str) -> str:
        """Destroy the resources managed by the Terraform configuration for ``name``."""
        path = self.target_path(name)
        return self.run_command(path, 'destroy')
