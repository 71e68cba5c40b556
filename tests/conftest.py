import pytest
from click.testing import CliRunner
from unittest.mock import MagicMock

from lanzo.core.orchestrator import ServiceOrchestrator
from lanzo.core.registry import ServiceRegistry
from lanzo.services.exceptions import (
    ContainerNotFoundError,
    CreationFailedError,
    NetworkNotFoundError,
)


class FakeContainer:
    """Stand-in for docker's Container model."""

    def __init__(self, name, container_id, ports=None):
        self.name = name
        self.id = container_id
        self.status = "created"
        self.ports = ports or {}

    @property
    def attrs(self):
        running = self.status == "running"
        return {
            "State": {"Running": running, "Status": self.status},
            "NetworkSettings": {"Ports": self.ports if running else {}},
        }


class FakeNetwork:
    def __init__(self, name):
        self.name = name
        self.containers = []


class FakeEngine:
    """In-memory engine handle recording every call in order.

    ``calls`` holds ``(operation, target)`` tuples. Put an exception in
    ``failures[(operation, target)]`` to make that call raise it.
    """

    def __init__(self):
        self.calls = []
        self.failures = {}
        self.containers = {}
        self.networks = {}
        self.exec_output = [b"pulling manifest\n", b"success\n"]
        self.exec_exit = 0
        self._next_id = 0

    def _record(self, operation, target):
        self.calls.append((operation, target))
        failure = self.failures.get((operation, target))
        if failure is not None:
            raise failure

    def ops(self, *operations):
        return [call for call in self.calls if call[0] in operations]

    def find_container(self, name):
        self._record("find", name)
        return self.containers.get(name)

    def get_container(self, name):
        self._record("inspect", name)
        if name not in self.containers:
            raise ContainerNotFoundError(f"Container '{name}' not found")
        return self.containers[name]

    def create_container(self, spec):
        self._record("create", spec.name)
        if spec.name in self.containers:
            raise CreationFailedError(f"Conflict. The container name \"/{spec.name}\" is already in use")
        self._next_id += 1
        ports = {
            port: [{"HostIp": "", "HostPort": str(binding)} for binding in bindings]
            for port, bindings in spec.port_bindings.items()
        }
        container = FakeContainer(spec.name, f"{spec.name}-{self._next_id:04d}", ports)
        container.spec = spec
        self.containers[spec.name] = container
        return container

    def start_container(self, container):
        self._record("start", container.name)
        container.status = "running"

    def stop_container(self, container):
        self._record("stop", container.name)
        container.status = "exited"

    def remove_container(self, container, force=False):
        self._record("remove", container.name)
        if self.containers.get(container.name) is not container:
            raise ContainerNotFoundError(f"Container '{container.name}' not found")
        del self.containers[container.name]

    def get_network(self, name):
        self._record("get_network", name)
        if name not in self.networks:
            raise NetworkNotFoundError(f"Network '{name}' not found")
        return self.networks[name]

    def create_network(self, name):
        self._record("create_network", name)
        self.networks[name] = FakeNetwork(name)
        return self.networks[name]

    def connect_network(self, network, container):
        self._record("connect", (network.name, container.name))
        network.containers.append(container.name)

    def exec_in_container(self, container, command):
        self._record("exec", container.name)
        return "exec-1", iter(self.exec_output)

    def exec_exit_code(self, exec_id):
        return self.exec_exit


class FakeResolver:
    """Hands out the same fake engine and remembers requested hosts."""

    def __init__(self, engine):
        self.engine = engine
        self.hosts = []

    def resolve(self, target_host=None):
        self.hosts.append(target_host)
        return self.engine


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def mock_docker_client():
    """Provides a mocked Docker client."""
    mock_client = MagicMock()
    mock_client.ping.return_value = True
    mock_client.containers.list.return_value = []
    return mock_client


@pytest.fixture
def registry():
    """The built-in service registry."""
    return ServiceRegistry.default()


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def resolver(engine):
    return FakeResolver(engine)


@pytest.fixture
def orchestrator(registry, resolver):
    """Orchestrator over the built-in registry and a fake engine, no settle delay."""
    return ServiceOrchestrator(registry, resolver=resolver, settle_delay=0)


@pytest.fixture(autouse=True)
def clean_lanzo_env(monkeypatch):
    """Keep host configuration out of the tests."""
    for var in ("LANZO_REGISTRY_FILE", "LANZO_ENGINE_PORT", "LANZO_SETTLE_DELAY", "PORT", "LANZO_HOST",
                "LANZO_TERRAFORM_ROOT", "LANZO_TERRAFORM_IMAGE", "LANZO_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
