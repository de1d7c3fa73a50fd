"""Shared schema configuration — camelCase aliases on the wire."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base DTO: serializes with camelCase aliases, accepts either spelling."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestModel(CamelModel):
    """Base request body: Infinity and NaN are rejected."""
    model_config = ConfigDict(allow_inf_nan=False)
