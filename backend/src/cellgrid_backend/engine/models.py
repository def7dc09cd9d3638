from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


SERVICE_VERSION = "0.1.0"

# Dimensions and coordinates travel as unsigned bytes on the wire.
MAX_COORDINATE = 255


class CreateTableRequest(BaseModel):
    id: str
    size_y: int = Field(ge=0, le=MAX_COORDINATE)
    size_x: int = Field(ge=0, le=MAX_COORDINATE)

    model_config = ConfigDict(extra="forbid")


class ChangeTableRequest(BaseModel):
    id: str
    x: int = Field(ge=0, le=MAX_COORDINATE)
    y: int = Field(ge=0, le=MAX_COORDINATE)
    value: str

    model_config = ConfigDict(extra="forbid")


class TableState(BaseModel):
    id: str
    size_x: int = Field(ge=0)
    size_y: int = Field(ge=0)
    data: list[list[str]]

    model_config = ConfigDict(extra="forbid")
