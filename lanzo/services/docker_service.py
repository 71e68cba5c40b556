"""Docker service for abstracting container engine operations."""

import logging
from typing import Any, Iterator, Optional

import docker
import docker.errors
import requests.exceptions
from docker.models.containers import Container
from docker.models.networks import Network

from ..models.container import ContainerSpec
from .exceptions import (
    ContainerNotFoundError,
    CreationFailedError,
    DockerServiceError,
    EngineUnreachableError,
    ExecFailedError,
    NetworkAttachFailedError,
    NetworkNotFoundError,
    RemovalFailedError,
    StartFailedError,
    StopFailedError,
)

logger = logging.getLogger(__name__)


class DockerService:
    """Handle bound to a single container engine endpoint.

    The underlying client is created on first use, so building a handle
    never touches the network. Connection problems surface as
    ``EngineUnreachableError`` from whichever operation runs first.
    """

    def __init__(self, base_url: Optional[str] = None, client: Optional[docker.DockerClient] = None):
        self.base_url = base_url
        self._client = client

    @property
    def endpoint(self) -> str:
        return self.base_url or "local"

    @property
    def client(self) -> docker.DockerClient:
        """Get the underlying Docker client, connecting on first access."""
        if self._client is None:
            try:
                if self.base_url:
                    self._client = docker.DockerClient(base_url=self.base_url)
                else:
                    self._client = docker.from_env()
            except docker.errors.DockerException as e:
                raise EngineUnreachableError(
                    f"Cannot reach container engine at {self.endpoint}: {e}"
                ) from e
        return self._client

    def _unreachable(self, e: Exception) -> EngineUnreachableError:
        return EngineUnreachableError(f"Cannot reach container engine at {self.endpoint}: {e}")

    def find_container(self, name: str) -> Optional[Container]:
        """Get a container by name, or None if it does not exist."""
        try:
            return self.get_container(name)
        except ContainerNotFoundError:
            return None

    def get_container(self, name: str) -> Container:
        """Get a container by ID or name.

        Raises:
            ContainerNotFoundError: If container not found
            EngineUnreachableError: If the engine cannot be reached
            DockerServiceError: If retrieval fails
        """
        client = self.client
        try:
            return client.containers.get(name)
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(f"Container '{name}' not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to get container: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e

    def create_container(self, spec: ContainerSpec) -> Container:
        """Create (but do not start) a container from a creation spec.

        Raises:
            CreationFailedError: If the engine refuses the spec
            EngineUnreachableError: If the engine cannot be reached
        """
        client = self.client
        ports = [tuple(port.split('/', 1)) if '/' in port else port for port in spec.exposed_ports]
        try:
            host_config = client.api.create_host_config(**spec.host_config_kwargs())
            response = client.api.create_container(
                image=spec.image,
                name=spec.name,
                environment=spec.environment or None,
                ports=ports or None,
                volumes=spec.volumes or None,
                host_config=host_config,
            )
            return client.containers.get(response['Id'])
        except docker.errors.APIError as e:
            raise CreationFailedError(f"Failed to create container '{spec.name}': {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e

    def start_container(self, container: Container) -> None:
        """Start a created container."""
        try:
            container.start()
        except docker.errors.APIError as e:
            raise StartFailedError(f"Failed to start container '{container.name}': {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e

    def stop_container(self, container: Container) -> None:
        """Stop a running container.

        Raises:
            ContainerNotFoundError: If container not found
            StopFailedError: If the engine cannot stop it
        """
        try:
            container.stop()
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(f"Container '{container.name}' not found") from e
        except docker.errors.APIError as e:
            raise StopFailedError(f"Failed to stop container '{container.name}': {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e

    def remove_container(self, container: Container, force: bool = False) -> None:
        """Remove a container.

        Args:
            container: Container object
            force: Force remove even if running

        Raises:
            ContainerNotFoundError: If container not found
            RemovalFailedError: If removal fails
        """
        try:
            container.remove(force=force)
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(f"Container '{container.name}' not found") from e
        except docker.errors.APIError as e:
            raise RemovalFailedError(f"Failed to remove container '{container.name}': {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e

    def get_network(self, name: str) -> Network:
        """Get a network by name or ID.

        Raises:
            NetworkNotFoundError: If network not found
            DockerServiceError: If lookup fails
        """
        client = self.client
        try:
            return client.networks.get(name)
        except docker.errors.NotFound as e:
            raise NetworkNotFoundError(f"Network '{name}' not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to get network: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e

    def create_network(self, name: str) -> Network:
        """Create a network with the engine's default driver."""
        client = self.client
        try:
            return client.networks.create(name)
        except docker.errors.APIError as e:
            raise CreationFailedError(f"Failed to create network '{name}': {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e

    def connect_network(self, network: Network, container: Container) -> None:
        """Connect a container to a network."""
        try:
            network.connect(container)
        except docker.errors.APIError as e:
            raise NetworkAttachFailedError(
                f"Failed to connect '{container.name}' to network '{network.name}': {e}"
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e

    def exec_in_container(self, container: Container, command: list[str]) -> tuple[str, Iterator[bytes]]:
        """Execute a command in a running container with streamed output.

        Args:
            container: Container object
            command: Command argv

        Returns:
            Tuple of (exec ID, iterator over stdout/stderr chunks)

        Raises:
            ExecFailedError: If the exec session cannot be started
        """
        client = self.client
        try:
            exec_id = client.api.exec_create(container.id, command, stdout=True, stderr=True)['Id']
            return exec_id, client.api.exec_start(exec_id, stream=True)
        except docker.errors.APIError as e:
            raise ExecFailedError(f"Failed to execute in container '{container.name}': {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e

    def exec_exit_code(self, exec_id: str) -> Optional[int]:
        """Exit code of a finished exec session, None while still running."""
        client = self.client
        try:
            return client.api.exec_inspect(exec_id).get('ExitCode')
        except docker.errors.APIError as e:
            raise ExecFailedError(f"Failed to inspect exec session: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e

    def run_container(
        self,
        image: str,
        command: Optional[list[str]] = None,
        remove: bool = False,
        detach: bool = True,
        **kwargs,
    ) -> Any:
        """Run a container and return output or container object.

        Args:
            image: Image name
            command: Command to run
            remove: Remove container after run
            detach: Run in background
            **kwargs: Additional Docker run parameters

        Returns:
            Container output (if not detached) or Container object (if detached)

        Raises:
            CreationFailedError: If the engine cannot run the container
        """
        client = self.client
        try:
            return client.containers.run(
                image=image,
                command=command,
                remove=remove,
                detach=detach,
                **kwargs,
            )
        except docker.errors.ContainerError as e:
            raise DockerServiceError(f"Container exited with error: {e}") from e
        except docker.errors.APIError as e:
            raise CreationFailedError(f"Failed to run container: {e}") from e
        except docker.errors.DockerException as e:
            raise DockerServiceError(f"Unexpected error running container: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e

    def wait_container(self, container: Container) -> int:
        """Block until a container exits and return its status code."""
        try:
            result = container.wait()
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to wait for container: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e
        return result.get('StatusCode', 0)

    def container_logs(self, container: Container) -> str:
        """Combined stdout and stderr of a container, decoded."""
        try:
            logs = container.logs(stdout=True, stderr=True)
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to read container logs: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise self._unreachable(e) from e
        if isinstance(logs, bytes):
            return logs.decode('utf-8', errors='replace')
        return logs
