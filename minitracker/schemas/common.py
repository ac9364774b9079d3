"""Shared schema pieces: camelCase wire format and the response envelope."""

from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Trimmed free text; blank strings are kept as "" and normalised by the services
OptionalText = Annotated[str, StringConstraints(strip_whitespace=True)] | None


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire. Accepts either on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class Envelope(BaseModel, Generic[T]):
    """Uniform success body: {"success": true, "data": ...}."""

    success: bool = True
    data: T | None = None
    message: str | None = None


class MessageData(CamelModel):
    message: str


def ok(data=None, message: str | None = None) -> dict:
    return {"success": True, "data": data, "message": message}
