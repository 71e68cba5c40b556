"""Process configuration loaded from the environment."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from .constants import (
    DEFAULT_ENGINE_PORT,
    DEFAULT_HTTP_HOST,
    DEFAULT_HTTP_PORT,
    POST_START_SETTLE_DELAY,
    TERRAFORM_DIR_NAME,
    TERRAFORM_IMAGE,
)


class Settings(BaseModel):
    """Runtime settings for the server, CLI and orchestrator."""
    http_host: str = DEFAULT_HTTP_HOST
    http_port: int = DEFAULT_HTTP_PORT
    engine_port: int = DEFAULT_ENGINE_PORT
    settle_delay: float = POST_START_SETTLE_DELAY
    registry_file: Optional[Path] = None
    terraform_root: Path = Path.cwd() / TERRAFORM_DIR_NAME
    terraform_image: str = TERRAFORM_IMAGE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> 'Settings':
        """Create settings from environment variables, falling back to defaults."""
        registry_file = os.environ.get('LANZO_REGISTRY_FILE')
        return cls(
            http_host=os.environ.get('LANZO_HOST', DEFAULT_HTTP_HOST),
            http_port=int(os.environ.get('PORT', DEFAULT_HTTP_PORT)),
            engine_port=int(os.environ.get('LANZO_ENGINE_PORT', DEFAULT_ENGINE_PORT)),
            settle_delay=float(os.environ.get('LANZO_SETTLE_DELAY', POST_START_SETTLE_DELAY)),
            registry_file=Path(registry_file) if registry_file else None,
            terraform_root=Path(os.environ.get('LANZO_TERRAFORM_ROOT', Path.cwd() / TERRAFORM_DIR_NAME)),
            terraform_image=os.environ.get('LANZO_TERRAFORM_IMAGE', TERRAFORM_IMAGE),
            log_level=os.environ.get('LANZO_LOG_LEVEL', 'INFO').upper(),
        )
