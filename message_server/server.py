import uvicorn
from fastapi import FastAPI
from loguru import logger

from message_server.app import create_app
from message_server.config import Settings


class MessageServer:
    """Owns the application and its listener for the lifetime of the process."""

    def __init__(self, settings: Settings, app: FastAPI | None = None) -> None:
        self.settings = settings
        self.app = app if app is not None else create_app()
        config = uvicorn.Config(
            self.app,
            host=settings.HOST,
            port=settings.PORT,
            log_level=settings.LOG_LEVEL.lower(),
        )
        self._server = uvicorn.Server(config)

    @property
    def started(self) -> bool:
        return self._server.started

    def run(self) -> None:
        """Serve until shutdown() is called or the process is interrupted."""
        logger.info(f"Listening on http://{self.settings.HOST}:{self.settings.PORT}")
        self._server.run()

    def shutdown(self) -> None:
        logger.info("Shutting down")
        self._server.should_exit = True
