from collections.abc import Callable, Sequence

from fastapi import Request
from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

Interceptor = Callable[[Request, MutableHeaders], None]


class InterceptorMiddleware:
    """Runs an ordered list of interceptors before a request is dispatched.

    Headers the interceptors stage are written onto the response when it
    starts, overriding any header of the same name the route set. This covers
    responses produced by the framework itself, such as 404 and 405.
    """

    def __init__(self, app: ASGIApp, interceptors: Sequence[Interceptor] = ()) -> None:
        self.app = app
        self.interceptors = tuple(interceptors)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        staged = MutableHeaders()
        for interceptor in self.interceptors:
            interceptor(request, staged)

        async def send_with_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for key, value in staged.items():
                    headers[key] = value
            await send(message)

        await self.app(scope, receive, send_with_headers)
