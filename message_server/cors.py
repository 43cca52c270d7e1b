"""Cross-origin request handling.

Interceptors have the signature ``(request, headers) -> None``: they may read
the incoming request and stage headers on the outgoing response. They never
touch the request body.
"""
from fastapi import Request
from starlette.datastructures import MutableHeaders

ALLOW_ORIGIN = "Access-Control-Allow-Origin"
REQUEST_HEADERS = "Access-Control-Request-Headers"
REQUEST_METHOD = "Access-Control-Request-Method"

# headers a preflight request asks about, echoed back verbatim
ECHOED_HEADERS = (REQUEST_HEADERS, REQUEST_METHOD)


def echo_request_header(header: str, request: Request, headers: MutableHeaders) -> None:
    """Copy `header` from the request to the response, if the caller sent it."""
    value = request.headers.get(header)
    if value is not None:
        headers[header] = value


def allow_any_origin(request: Request, headers: MutableHeaders) -> None:
    headers[ALLOW_ORIGIN] = "*"


def json_content_type(request: Request, headers: MutableHeaders) -> None:
    headers["Content-Type"] = "application/json"


DEFAULT_INTERCEPTORS = (allow_any_origin, json_content_type)
