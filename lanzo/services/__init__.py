"""Service layer for abstracting container engine operations."""

from .docker_service import DockerService
from .exceptions import (
    ContainerNotFoundError,
    CreationFailedError,
    DockerServiceError,
    EngineUnreachableError,
    ExecFailedError,
    InvalidProvisioningTargetError,
    InvalidRegistryError,
    LanzoError,
    NetworkAttachFailedError,
    NetworkNotFoundError,
    ProvisioningError,
    ProvisioningFailedError,
    RemovalFailedError,
    StartFailedError,
    StopFailedError,
    UnknownServiceError,
)

__all__ = [
    "DockerService",
    "LanzoError",
    "UnknownServiceError",
    "InvalidRegistryError",
    "DockerServiceError",
    "EngineUnreachableError",
    "ContainerNotFoundError",
    "NetworkNotFoundError",
    "CreationFailedError",
    "StartFailedError",
    "StopFailedError",
    "RemovalFailedError",
    "NetworkAttachFailedError",
    "ExecFailedError",
    "ProvisioningError",
    "InvalidProvisioningTargetError",
    "ProvisioningFailedError",
]
