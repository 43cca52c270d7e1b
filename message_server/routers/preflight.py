from fastapi import APIRouter, Request, Response
from loguru import logger
from starlette.datastructures import MutableHeaders

from message_server.cors import ECHOED_HEADERS, echo_request_header


router = APIRouter(tags=["cors"])


@router.options("/{path:path}")
async def preflight(path: str, request: Request) -> Response:
    """Answer a CORS preflight by echoing the access-control headers the caller sent."""
    headers = MutableHeaders()
    for header in ECHOED_HEADERS:
        echo_request_header(header, request, headers)
    logger.debug(f"Preflight for /{path} - echoing {dict(headers)}")
    return Response(content="OK", media_type="application/json", headers=dict(headers))
