from fastapi import APIRouter

from message_server.schema import PingResponse


router = APIRouter(tags=["health"])


@router.get("/ping")
async def ping() -> PingResponse:
    return PingResponse(message="Pong!")
