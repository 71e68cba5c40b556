"""Service descriptor models."""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PortBinding(BaseModel):
    """Host side of a published container port."""
    model_config = ConfigDict(populate_by_name=True)

    host_port: str = Field(alias="HostPort")
    host_ip: Optional[str] = Field(default=None, alias="HostIp")

    @field_validator("host_port", mode="before")
    @classmethod
    def _port_as_string(cls, value):
        # YAML registries usually write ports as bare integers
        return str(value) if isinstance(value, int) else value


class VolumeMount(BaseModel):
    """Named volume (or host path) mounted into the container."""
    host_path: str
    container_path: str


class ConcreteService(BaseModel):
    """A single deployable container."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    image: str
    container_name: str
    exposed_ports: Dict[str, List[PortBinding]] = Field(default_factory=dict)
    env: List[str] = Field(default_factory=list)
    binds: List[str] = Field(default_factory=list)
    volumes: List[VolumeMount] = Field(default_factory=list)
    network: Optional[str] = None
    restart: Optional[str] = None
    runtime: Optional[str] = None
    depends_on: List[str] = Field(default_factory=list)
    post_start_cmd: Optional[List[str]] = None


class CompositeService(BaseModel):
    """A named, ordered group of other services."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    services: List[str] = Field(min_length=1)


ServiceDescriptor = Union[ConcreteService, CompositeService]
