from aiohttp import web
from aiohttp.web_request import Request

from lanzo.version import __version__


async def healthcheck(request: Request) -> web.Response:
    return web.json_response({
        'status': 'ok',
        'version': __version__,
    })
