"""Service registry: the static table of deployable services."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional

import yaml
from pydantic import ValidationError

from ..models.service import CompositeService, ConcreteService, ServiceDescriptor
from ..services.exceptions import InvalidRegistryError, UnknownServiceError
from .default_services import DEFAULT_SERVICES

logger = logging.getLogger(__name__)

COMPOSITE_KEY = "services"


def parse_descriptor(name: str, entry: Mapping[str, Any]) -> ServiceDescriptor:
    """Turn a raw registry entry into a concrete or composite descriptor.

    An entry that lists ``services`` is composite and may not carry any
    deployment field. Every other entry must name an image; its container
    name defaults to the service name.
    """
    if not isinstance(entry, Mapping):
        raise InvalidRegistryError(f"Service '{name}' must be a mapping, got {type(entry).__name__}")

    try:
        if COMPOSITE_KEY in entry:
            extra = sorted(set(entry) - {COMPOSITE_KEY})
            if extra:
                raise InvalidRegistryError(
                    f"Composite service '{name}' cannot declare deployment fields: {', '.join(extra)}"
                )
            return CompositeService(name=name, services=entry[COMPOSITE_KEY])

        if not entry.get("image"):
            raise InvalidRegistryError(f"Service '{name}' declares neither an image nor member services")
        data = dict(entry)
        data["name"] = name
        data["container_name"] = entry.get("container_name") or name
        return ConcreteService.model_validate(data)
    except ValidationError as e:
        raise InvalidRegistryError(f"Invalid descriptor for service '{name}': {e}") from e


def _edges(descriptor: ServiceDescriptor) -> List[str]:
    if isinstance(descriptor, CompositeService):
        return list(descriptor.services)
    return list(descriptor.depends_on)


class ServiceRegistry:
    """Read-only mapping from service name to descriptor.

    Validated once when built: every member and dependency must be
    registered and the member/dependency graph must be acyclic.
    """

    def __init__(self, descriptors: Mapping[str, ServiceDescriptor]):
        self._descriptors: Dict[str, ServiceDescriptor] = dict(descriptors)
        self._check_references()
        self._check_cycles()

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> 'ServiceRegistry':
        """Build a registry from a raw ``name -> entry`` table."""
        if not isinstance(raw, Mapping):
            raise InvalidRegistryError("Service registry must be a mapping of service names")
        return cls({str(name): parse_descriptor(str(name), entry) for name, entry in raw.items()})

    @classmethod
    def from_yaml(cls, path: Path) -> 'ServiceRegistry':
        """Load a registry from a YAML file with the built-in table's shape."""
        try:
            raw = yaml.safe_load(Path(path).read_text())
        except OSError as e:
            raise InvalidRegistryError(f"Cannot read registry file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise InvalidRegistryError(f"Registry file {path} is not valid YAML: {e}") from e
        registry = cls.from_mapping(raw or {})
        logger.info(f"Loaded {len(registry)} services from {path}")
        return registry

    @classmethod
    def default(cls) -> 'ServiceRegistry':
        return cls.from_mapping(DEFAULT_SERVICES)

    @classmethod
    def load(cls, registry_file: Optional[Path] = None) -> 'ServiceRegistry':
        """Registry from ``registry_file`` when given, the built-in table otherwise."""
        if registry_file:
            return cls.from_yaml(registry_file)
        return cls.default()

    def get(self, name: str) -> ServiceDescriptor:
        try:
            return self._descriptors[name]
        except KeyError:
            raise UnknownServiceError(name) from None

    def names(self) -> List[str]:
        return list(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def __iter__(self) -> Iterator[ServiceDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)

    def _check_references(self):
        for descriptor in self._descriptors.values():
            for ref in _edges(descriptor):
                if ref not in self._descriptors:
                    raise InvalidRegistryError(
                        f"Service '{descriptor.name}' references unregistered service '{ref}'"
                    )

    def _check_cycles(self):
        # Depth-first walk; a grey node reached again closes a cycle.
        white, grey, black = 0, 1, 2
        color = {name: white for name in self._descriptors}
        path: List[str] = []

        def visit(name: str):
            color[name] = grey
            path.append(name)
            for ref in _edges(self._descriptors[name]):
                if color[ref] == grey:
                    cycle = path[path.index(ref):] + [ref]
                    raise InvalidRegistryError(f"Service graph has a cycle: {' -> '.join(cycle)}")
                if color[ref] == white:
                    visit(ref)
            path.pop()
            color[name] = black

        for name in self._descriptors:
            if color[name] == white:
                visit(name)
