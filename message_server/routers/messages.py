from fastapi import APIRouter

from message_server.schema import Message


router = APIRouter(tags=["messages"])


def get_messages() -> list[Message]:
    """Build the fixed list of messages served to every caller."""
    return [
        Message(from_="Alice", to="Bob", message="Hello"),
        Message(from_="John", to="Doe", message="World"),
    ]


@router.get("/messages")
async def messages() -> list[Message]:
    return get_messages()
