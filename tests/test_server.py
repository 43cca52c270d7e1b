from message_server.app import create_app
from message_server.config import Settings
from message_server.server import MessageServer


def test_defaults(monkeypatch) -> None:
    for name in ("HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.HOST == "127.0.0.1"
    assert settings.PORT == 8000


def test_server_from_settings() -> None:
    settings = Settings(_env_file=None, HOST="0.0.0.0", PORT=9001)
    server = MessageServer(settings)
    assert server._server.config.host == "0.0.0.0"
    assert server._server.config.port == 9001
    assert server.app.title == "Messages"
    assert not server.started


def test_server_uses_given_app() -> None:
    app = create_app()
    server = MessageServer(Settings(_env_file=None), app=app)
    assert server.app is app


def test_shutdown_flags_listener() -> None:
    server = MessageServer(Settings(_env_file=None))
    server.shutdown()
    assert server._server.should_exit
