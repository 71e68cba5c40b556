"""Core orchestration components."""

from .config import Settings
from .engine_resolver import EngineResolver
from .network_binder import ensure_attached
from .orchestrator import ServiceOrchestrator
from .post_start import PostStartJob
from .provisioner import Provisioner
from .registry import ServiceRegistry

__all__ = [
    'EngineResolver',
    'PostStartJob',
    'Provisioner',
    'ServiceOrchestrator',
    'ServiceRegistry',
    'Settings',
    'ensure_attached',
]
