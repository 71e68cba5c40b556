"""Custom exceptions for the orchestration and service layers."""


class LanzoError(Exception):
    """Base exception for all Lanzo errors."""

    pass


class UnknownServiceError(LanzoError):
    """Exception raised when a service name is not in the registry."""

    def __init__(self, service: str):
        super().__init__(f"Unsupported service: '{service}'")
        self.service = service


class InvalidRegistryError(LanzoError):
    """Exception raised when the service registry cannot be loaded."""

    pass


class DockerServiceError(LanzoError):
    """Exception raised for container engine operations."""

    pass


class EngineUnreachableError(DockerServiceError):
    """Exception raised when the container engine cannot be reached."""

    pass


class ContainerNotFoundError(DockerServiceError):
    """Exception raised when a Docker container is not found."""

    pass


class NetworkNotFoundError(DockerServiceError):
    """Exception raised when a Docker network is not found."""

    pass


class CreationFailedError(DockerServiceError):
    """Exception raised when the engine refuses to create a container or network."""

    pass


class StartFailedError(DockerServiceError):
    """Exception raised when a created container fails to start."""

    pass


class StopFailedError(DockerServiceError):
    """Exception raised when a container fails to stop."""

    pass


class RemovalFailedError(DockerServiceError):
    """Exception raised when a container cannot be removed."""

    pass


class NetworkAttachFailedError(DockerServiceError):
    """Exception raised when a container cannot be connected to a network."""

    pass


class ExecFailedError(DockerServiceError):
    """Exception raised when a command cannot be executed in a container."""

    pass


class ProvisioningError(LanzoError):
    """Base exception for infrastructure provisioning."""

    pass


class InvalidProvisioningTargetError(ProvisioningError):
    """Exception raised when a provisioning directory does not exist."""

    pass


class ProvisioningFailedError(ProvisioningError):
    """Exception raised when a provisioning command exits with an error."""

    def __init__(self, command: str, exit_code: int, logs: str):
        super().__init__(f"Error running {command} (exit code {exit_code}): {logs}")
        self.command = command
        self.exit_code = exit_code
        self.logs = logs
