from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    """
    Platform event. Entrypoints subclass it to declare their ``data`` shape.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    params: dict[str, list[str]] | None = None
    request_headers: dict[str, str] | None = None
    type: str | None = None


class Context(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    async_: bool | None = Field(default=None, alias="async")
    date: str | None = None
    type: str | None = None


class Return(BaseModel):
    """
    Structured entrypoint result. Unset fields are left out of the envelope.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    status: int | None = None
    response_headers: dict[str, str] | None = None
    data: Any = None
    type: str | None = None
