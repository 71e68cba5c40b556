"""Models for Lanzo."""

from .container import ContainerSpec, RunningContainer
from .service import (
    CompositeService,
    ConcreteService,
    PortBinding,
    ServiceDescriptor,
    VolumeMount,
)

__all__ = [
    'CompositeService',
    'ConcreteService',
    'ContainerSpec',
    'PortBinding',
    'RunningContainer',
    'ServiceDescriptor',
    'VolumeMount',
]
