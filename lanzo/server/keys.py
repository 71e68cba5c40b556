from aiohttp import web

from lanzo.core.orchestrator import ServiceOrchestrator
from lanzo.core.provisioner import Provisioner

ORCHESTRATOR = web.AppKey('orchestrator', ServiceOrchestrator)
PROVISIONER = web.AppKey('provisioner', Provisioner)
