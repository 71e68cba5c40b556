import asyncio
import functools
import logging
from typing import TypedDict

from aiohttp import web
from aiohttp.web_request import Request

from lanzo.server.handlers.errors import error_response
from lanzo.server.keys import PROVISIONER
from lanzo.services.exceptions import LanzoError

logger = logging.getLogger(__name__)


class DeployResponseParams(TypedDict):
    message: str
    outputs: dict[str, str]


class DestroyResponseParams(TypedDict):
    message: str
    output: str


async def deploy(request: Request) -> web.Response:
    name = request.match_info['service']
    provisioner = request.app[PROVISIONER]
    try:
        outputs = await asyncio.get_running_loop().run_in_executor(
            None, functools.partial(provisioner.deploy, name)
        )
    except LanzoError as e:
        logger.error(f'Deploy of {name} failed: {e}')
        return error_response(e)
    return web.json_response(DeployResponseParams(message='Deployment completed successfully', outputs=outputs))


async def destroy(request: Request) -> web.Response:
    name = request.match_info['service']
    provisioner = request.app[PROVISIONER]
    try:
        output = await asyncio.get_running_loop().run_in_executor(
            None, functools.partial(provisioner.destroy, name)
        )
    except LanzoError as e:
        logger.error(f'Destroy of {name} failed: {e}')
        return error_response(e)
    return web.json_response(DestroyResponseParams(message='Resources destroyed successfully', output=output))
