"""Container creation spec and running container handle."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .service import ConcreteService


class ContainerSpec(BaseModel):
    """Creation spec derived from a concrete service descriptor.

    Optional engine settings stay ``None`` when the descriptor does not
    declare them so that the engine applies its own defaults.
    """
    image: str
    name: str
    environment: List[str] = Field(default_factory=list)
    exposed_ports: List[str] = Field(default_factory=list)
    port_bindings: Dict[str, List[Any]] = Field(default_factory=dict)
    binds: List[str] = Field(default_factory=list)
    volumes: List[str] = Field(default_factory=list)
    mounts: List[Dict[str, str]] = Field(default_factory=list)
    restart_policy: Optional[Dict[str, str]] = None
    runtime: Optional[str] = None

    @classmethod
    def from_service(cls, service: ConcreteService) -> 'ContainerSpec':
        """Build the creation spec for a concrete service."""
        port_bindings = {}
        for container_port, bindings in service.exposed_ports.items():
            port_bindings[container_port] = [
                (b.host_ip, b.host_port) if b.host_ip else b.host_port
                for b in bindings
            ]

        return cls(
            image=service.image,
            name=service.container_name,
            environment=list(service.env),
            exposed_ports=list(service.exposed_ports),
            port_bindings=port_bindings,
            binds=list(service.binds),
            volumes=[v.container_path for v in service.volumes],
            mounts=[
                {"Target": v.container_path, "Source": v.host_path, "Type": "volume"}
                for v in service.volumes
            ],
            restart_policy={"Name": service.restart} if service.restart else None,
            runtime=service.runtime,
        )

    def host_config_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for the engine's host config, declared fields only."""
        kwargs: Dict[str, Any] = {}
        if self.port_bindings:
            kwargs['port_bindings'] = self.port_bindings
        if self.binds:
            kwargs['binds'] = self.binds
        if self.mounts:
            kwargs['mounts'] = self.mounts
        if self.restart_policy:
            kwargs['restart_policy'] = self.restart_policy
        if self.runtime:
            kwargs['runtime'] = self.runtime
        return kwargs


@dataclass
class RunningContainer:
    """Handle for a container brought up during one operation."""

    service: str
    id: str
    name: str
    post_start_job: Optional[Any] = field(default=None, repr=False, compare=False)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'service': self.service,
            'id': self.id,
            'name': self.name,
        }
