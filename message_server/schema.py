"""Pydantic models for responses."""
from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """A message sent from one person to another."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # `from` is a keyword, so the field is stored under from_ and serialized by alias
    from_: str = Field(alias="from")
    to: str
    message: str


class PingResponse(BaseModel):
    message: str
