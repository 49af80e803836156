# soora_api/schemas/common.py
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class MessageOut(CamelModel):
    message: str


class ValidationErrorItem(CamelModel):
    field: str
    message: str
    type: str


class ValidationErrorOut(CamelModel):
    errors: List[ValidationErrorItem]


class ErrorOut(CamelModel):
    error: str
