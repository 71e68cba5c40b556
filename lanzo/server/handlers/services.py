import asyncio
import functools
import json
import logging
from typing import Any
from typing import TypedDict

from aiohttp import web
from aiohttp.web_request import Request

from lanzo.models.container import RunningContainer
from lanzo.server.handlers.errors import ErrorResponseParams
from lanzo.server.handlers.errors import error_response
from lanzo.server.keys import ORCHESTRATOR
from lanzo.services.exceptions import LanzoError

logger = logging.getLogger(__name__)


class ServiceRequestParams(TypedDict, total=False):
    targetHost: str | None
    ip: str | None


class RunResponseParams(TypedDict):
    message: str
    containers: Any


class StopResponseParams(TypedDict):
    message: str


class PortResponseParams(TypedDict):
    message: str
    ports: dict


def serialize_run_result(result) -> Any:
    if isinstance(result, RunningContainer):
        return result.to_dict()
    return [serialize_run_result(item) for item in result]


def _pick_target_host(params) -> str | None:
    if not isinstance(params, dict):
        return None
    return params.get('targetHost') or params.get('ip') or None


async def _body_target_host(request: Request) -> str | None:
    if not request.can_read_body:
        return None
    raw = await request.text()
    if not raw.strip():
        return None
    try:
        params: ServiceRequestParams = json.loads(raw)
    except json.JSONDecodeError as e:
        raise web.HTTPBadRequest(
            text=json.dumps(ErrorResponseParams(error=f'Invalid JSON body: {e}', type='BadRequest')),
            content_type='application/json',
        )
    return _pick_target_host(params)


async def _in_executor(func, *args):
    return await asyncio.get_running_loop().run_in_executor(None, functools.partial(func, *args))


async def run_service(request: Request) -> web.Response:
    service = request.match_info['service']
    target_host = await _body_target_host(request)
    orchestrator = request.app[ORCHESTRATOR]

    try:
        result = await _in_executor(orchestrator.run_service, service, target_host)
    except LanzoError as e:
        logger.error(f'Failed to run {service}: {e}')
        return error_response(e)

    return web.json_response(RunResponseParams(
        message=f'Container(s) for {service} started successfully',
        containers=serialize_run_result(result),
    ), status=200)


async def stop_service(request: Request) -> web.Response:
    service = request.match_info['service']
    target_host = await _body_target_host(request)
    orchestrator = request.app[ORCHESTRATOR]

    try:
        await _in_executor(orchestrator.stop_service, service, target_host)
    except LanzoError as e:
        logger.error(f'Failed to stop {service}: {e}')
        return error_response(e)

    return web.json_response(StopResponseParams(
        message=f'Container(s) for {service} stopped and removed successfully',
    ), status=200)


async def get_port_mapping(request: Request) -> web.Response:
    service = request.match_info['service']
    target_host = _pick_target_host(dict(request.query))
    orchestrator = request.app[ORCHESTRATOR]

    try:
        ports = await _in_executor(orchestrator.get_port_mapping, service, target_host)
    except LanzoError as e:
        logger.error(f'Failed to get ports of {service}: {e}')
        return error_response(e)

    return web.json_response(PortResponseParams(
        message=f'Mapped ports for {service}',
        ports=ports,
    ), status=200)
