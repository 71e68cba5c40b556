"""Resolve a target host into an engine handle."""

import logging
from typing import Optional

from ..services.docker_service import DockerService
from .constants import DEFAULT_ENGINE_PORT

logger = logging.getLogger(__name__)


class EngineResolver:
    """Builds a fresh ``DockerService`` per operation.

    An empty target host selects the local engine configured through the
    environment; any other host is reached over TCP on ``engine_port``.
    """

    def __init__(self, engine_port: int = DEFAULT_ENGINE_PORT):
        self.engine_port = engine_port

    def base_url(self, target_host: Optional[str]) -> Optional[str]:
        host = (target_host or "").strip()
        if not host:
            return None
        if "://" in host:
            return host
        return f"tcp://{host}:{self.engine_port}"

    def resolve(self, target_host: Optional[str] = None) -> DockerService:
        base_url = self.base_url(target_host)
        logger.debug(f"Resolved engine endpoint: {base_url or 'local'}")
        return DockerService(base_url=base_url)
