from typing import TypedDict

from aiohttp import web

from lanzo.services.exceptions import ContainerNotFoundError
from lanzo.services.exceptions import EngineUnreachableError
from lanzo.services.exceptions import InvalidProvisioningTargetError
from lanzo.services.exceptions import LanzoError
from lanzo.services.exceptions import UnknownServiceError

ERROR_STATUSES = (
    (UnknownServiceError, 404),
    (ContainerNotFoundError, 404),
    (InvalidProvisioningTargetError, 400),
    (EngineUnreachableError, 502),
)


class ErrorResponseParams(TypedDict):
    error: str
    type: str


def error_response(error: LanzoError) -> web.Response:
    status = next((code for error_type, code in ERROR_STATUSES if isinstance(error, error_type)), 500)
    return web.json_response(ErrorResponseParams(error=str(error), type=type(error).__name__), status=status)
