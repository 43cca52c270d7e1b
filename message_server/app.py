from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator, Sequence

from fastapi import FastAPI
from loguru import logger

from message_server.cors import DEFAULT_INTERCEPTORS
from message_server.middleware import Interceptor, InterceptorMiddleware
from message_server.routers import messages, ping, preflight


@asynccontextmanager
async def lifetime(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(f"Starting {app.title}")
    yield
    logger.info(f"Stopping {app.title}")


def create_app(interceptors: Sequence[Interceptor] = DEFAULT_INTERCEPTORS) -> FastAPI:
    """Build the application, with `interceptors` run in order before every request."""
    app = FastAPI(title="Messages", lifespan=lifetime)
    app.add_middleware(InterceptorMiddleware, interceptors=interceptors)

    app.include_router(messages.router)
    app.include_router(ping.router)
    app.include_router(preflight.router)
    return app


app = create_app()
