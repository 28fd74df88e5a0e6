from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    """Response model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DataResponse(BaseModel, Generic[T]):
    data: T


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
