from math import ceil
from typing import Any, Optional, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=ceil(total / limit))


def serialize(schema: Type[BaseModel], obj: Any, fields: Optional[Any] = None) -> dict:
    """Render an ORM object through ``schema`` as camelCase JSON data.

    ``fields`` is a pydantic ``include`` mapping keyed by attribute names, so
    nested projections can be expressed as ``{"feedback": {"overall_score"}}``.
    """
    return schema.model_validate(obj).model_dump(by_alias=True, mode="json", include=fields)
