from message_server.config import settings
from message_server.server import MessageServer


def main() -> None:
    MessageServer(settings).run()


if __name__ == "__main__":
    main()
