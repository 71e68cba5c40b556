"""
HTTP server exposing the orchestrator.

Each handler describes its request and response params (for example
``run_service``: ``ServiceRequestParams`` / ``RunResponseParams``). Docker
SDK calls block, so handlers hand them to the default executor and keep
the event loop free for other requests.
"""
from lanzo.server.app import make_app
from lanzo.server.app import run_server

__all__ = ('make_app', 'run_server')
