import logging

from aiohttp import web

from lanzo.core.config import Settings
from lanzo.core.orchestrator import ServiceOrchestrator
from lanzo.core.provisioner import Provisioner
from lanzo.server.commands import DEPLOY_PATH
from lanzo.server.commands import DESTROY_PATH
from lanzo.server.commands import HEALTHCHECK_PATH
from lanzo.server.commands import SERVICE_PATH
from lanzo.server.commands import SERVICE_PORT_PATH
from lanzo.server.handlers.healthcheck import healthcheck
from lanzo.server.handlers.provision import deploy
from lanzo.server.handlers.provision import destroy
from lanzo.server.handlers.services import get_port_mapping
from lanzo.server.handlers.services import run_service
from lanzo.server.handlers.services import stop_service
from lanzo.server.keys import ORCHESTRATOR
from lanzo.server.keys import PROVISIONER

logger = logging.getLogger(__name__)


def make_app(orchestrator: ServiceOrchestrator, provisioner: Provisioner) -> web.Application:
    app = web.Application()
    app[ORCHESTRATOR] = orchestrator
    app[PROVISIONER] = provisioner
    app.add_routes([
        web.get(HEALTHCHECK_PATH, healthcheck),
        web.post(DEPLOY_PATH, deploy),
        web.post(DESTROY_PATH, destroy),

        # ============================
        web.post(SERVICE_PATH, run_service),
        web.delete(SERVICE_PATH, stop_service),
        web.get(SERVICE_PORT_PATH, get_port_mapping),
    ])
    return app


def run_server(settings: Settings):
    orchestrator = ServiceOrchestrator.from_settings(settings)
    provisioner = Provisioner(settings.terraform_root, image=settings.terraform_image)
    logger.info(f'Serving {len(orchestrator.registry)} services on {settings.http_host}:{settings.http_port}')
    web.run_app(make_app(orchestrator, provisioner), host=settings.http_host, port=settings.http_port)
