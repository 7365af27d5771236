"""Pydantic contracts for the v1 clients API."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

class _StrictModel(BaseModel):
    """Base model that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

LaneLiteral = Literal["backlog", "in-progress", "complete"]

class ClientContract(_StrictModel):
    id: int
    name: str
    description: str = ""
    status: LaneLiteral
    priority: int = Field(ge=1)

class UpdateClientRequest(BaseModel):
    """Body of ``PUT /clients/{id}``.

    Fields are loosely typed on purpose: bad values are reported with the
    API's ``{message, long_message}`` payload by the move validators rather
    than as a schema error.
    """

    model_config = ConfigDict(extra="ignore")

    status: str | None = None
    priority: Any = None


class MessageContract(_StrictModel):
    message: str
    long_message: str | None = None

