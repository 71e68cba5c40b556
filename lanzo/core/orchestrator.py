"""Service orchestration: bring up, tear down and inspect registered services."""

import logging
from typing import Any, Dict, List, Optional, Union

from ..models.container import ContainerSpec, RunningContainer
from ..models.service import CompositeService, ConcreteService, ServiceDescriptor
from ..services.docker_service import DockerService
from ..services.exceptions import ContainerNotFoundError, StopFailedError
from .config import Settings
from .constants import POST_START_SETTLE_DELAY
from .engine_resolver import EngineResolver
from .network_binder import ensure_attached
from .post_start import PostStartJob
from .registry import ServiceRegistry

logger = logging.getLogger(__name__)

RunResult = Union[RunningContainer, List[Any]]


class _Operation:
    """State shared by the recursive steps of one top-level call."""

    def __init__(self, engine: DockerService):
        self.engine = engine
        self.started: Dict[str, RunningContainer] = {}


class ServiceOrchestrator:
    """Runs lifecycle operations for registered services.

    Each public call resolves one engine handle and uses it for every
    recursive step. Stacks and dependencies are processed one at a time in
    declared order; the first failure stops the chain and nothing already
    started is rolled back.
    """

    def __init__(
        self,
        registry: ServiceRegistry,
        resolver: Optional[EngineResolver] = None,
        settle_delay: float = POST_START_SETTLE_DELAY,
        post_start_job=PostStartJob,
    ):
        self.registry = registry
        self.resolver = resolver or EngineResolver()
        self.settle_delay = settle_delay
        self.post_start_job = post_start_job

    @classmethod
    def from_settings(cls, settings: Settings) -> 'ServiceOrchestrator':
        return cls(
            registry=ServiceRegistry.load(settings.registry_file),
            resolver=EngineResolver(settings.engine_port),
            settle_delay=settings.settle_delay,
        )

    def run_service(self, service_name: str, target_host: Optional[str] = None) -> RunResult:
        """(Re)create and start a service, its dependencies and stack members.

        Returns:
            The running container, or a list of results for a stack

        Raises:
            UnknownServiceError: If the service is not registered
            DockerServiceError: If any engine step fails
        """
        descriptor = self.registry.get(service_name)
        operation = _Operation(self.resolver.resolve(target_host))
        return self._run(descriptor, operation)

    def stop_service(self, service_name: str, target_host: Optional[str] = None) -> None:
        """Stop and remove a service's container, or every member of a stack."""
        descriptor = self.registry.get(service_name)
        engine = self.resolver.resolve(target_host)
        self._stop(descriptor, engine)

    def get_port_mapping(self, service_name: str, target_host: Optional[str] = None) -> Dict[str, Any]:
        """Published ports of a service, or ``{member: ports}`` for a stack.

        Raises:
            ContainerNotFoundError: If a container does not exist or is not running
        """
        descriptor = self.registry.get(service_name)
        engine = self.resolver.resolve(target_host)
        return self._ports(descriptor, engine)

    def _run(self, descriptor: ServiceDescriptor, operation: _Operation) -> RunResult:
        if isinstance(descriptor, CompositeService):
            logger.info(f"Bringing up stack {descriptor.name}: {', '.join(descriptor.services)}")
            return [self._run(self.registry.get(member), operation) for member in descriptor.services]

        if descriptor.name in operation.started:
            logger.info(f"{descriptor.name} already started in this operation")
            return operation.started[descriptor.name]

        for dependency in descriptor.depends_on:
            logger.info(f"Starting dependency {dependency} of {descriptor.name}")
            self._run(self.registry.get(dependency), operation)

        running = self._run_concrete(descriptor, operation.engine)
        operation.started[descriptor.name] = running
        return running

    def _run_concrete(self, service: ConcreteService, engine: DockerService) -> RunningContainer:
        self._pre_clean(service, engine)

        spec = ContainerSpec.from_service(service)
        logger.info(f"Creating container {spec.name} from {spec.image}")
        container = engine.create_container(spec)
        # A start failure leaves the created container behind; the next
        # run's pre-clean removes it.
        engine.start_container(container)
        logger.info(f"Started container {spec.name} ({container.id})")

        if service.network:
            ensure_attached(container, service.network, engine)

        job = None
        if service.post_start_cmd:
            job = self.post_start_job(
                service.name,
                container,
                service.post_start_cmd,
                engine,
                settle_delay=self.settle_delay,
            ).start()

        return RunningContainer(
            service=service.name,
            id=container.id,
            name=spec.name,
            post_start_job=job,
        )

    def _pre_clean(self, service: ConcreteService, engine: DockerService):
        existing = engine.find_container(service.container_name)
        if existing is None:
            logger.debug(f"No existing container named {service.container_name}")
            return

        logger.info(f"Removing existing container {service.container_name}")
        try:
            engine.stop_container(existing)
        except (ContainerNotFoundError, StopFailedError) as e:
            logger.debug(f"Stop skipped for {service.container_name}: {e}")
        try:
            engine.remove_container(existing, force=True)
        except ContainerNotFoundError:
            logger.debug(f"{service.container_name} was removed concurrently")

    def _stop(self, descriptor: ServiceDescriptor, engine: DockerService):
        if isinstance(descriptor, CompositeService):
            for member in descriptor.services:
                self._stop(self.registry.get(member), engine)
            return

        container = engine.find_container(descriptor.container_name)
        if container is None:
            logger.info(f"{descriptor.container_name} is not present, nothing to stop")
            return

        try:
            engine.stop_container(container)
        except (ContainerNotFoundError, StopFailedError) as e:
            logger.debug(f"Ignoring stop failure for {descriptor.container_name}: {e}")
        try:
            engine.remove_container(container)
        except ContainerNotFoundError:
            logger.debug(f"{descriptor.container_name} was removed concurrently")
            return
        logger.info(f"Stopped and removed {descriptor.container_name}")

    def _ports(self, descriptor: ServiceDescriptor, engine: DockerService) -> Dict[str, Any]:
        if isinstance(descriptor, CompositeService):
            return {
                member: self._ports(self.registry.get(member), engine)
                for member in descriptor.services
            }

        container = engine.get_container(descriptor.container_name)
        if not container.attrs.get('State', {}).get('Running'):
            raise ContainerNotFoundError(f"No running container for '{descriptor.container_name}'")
        ports = container.attrs.get('NetworkSettings', {}).get('Ports')
        return dict(ports) if ports else {}
