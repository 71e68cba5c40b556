"""Attach containers to named networks, creating them on demand."""

import logging

from docker.models.containers import Container

from ..services.docker_service import DockerService
from ..services.exceptions import DockerServiceError

logger = logging.getLogger(__name__)


def ensure_attached(container: Container, network_name: str, engine: DockerService) -> None:
    """Connect ``container`` to ``network_name``, creating the network if needed.

    Any lookup failure counts as "does not exist" and leads to creation with
    the engine's default driver. Creation and connection errors propagate.
    """
    try:
        network = engine.get_network(network_name)
    except DockerServiceError as e:
        logger.info(f"Network {network_name} not available ({e}), creating it")
        network = engine.create_network(network_name)

    engine.connect_network(network, container)
    logger.info(f"Attached {container.name} to network {network_name}")
