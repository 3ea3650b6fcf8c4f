"""Standardized JSON response envelope helpers."""


from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Single-payload response envelope: `{ data: ..., message: "..." }`"""

    data: T
    message: str | None = None

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def envelope(data, message: str | None = None) -> dict:
    """Build a response dict for use with DataResponse."""
    return {"data": data, "message": message}
