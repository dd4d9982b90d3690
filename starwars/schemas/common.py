from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Wire models use camelCase keys; Python code uses field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Request bodies reject unknown keys."""

    model_config = ConfigDict(extra="forbid")


class PaginationSchema(CamelModel):
    page: int = Field(ge=1, description="Current page number", examples=[1])
    limit: int = Field(ge=1, le=100, description="Number of items per page", examples=[10])
    total: int = Field(ge=0, description="Total number of items", examples=[50])
    total_pages: int = Field(ge=0, description="Total number of pages", examples=[5])
