"""Shared response shapes for paginated listings."""

from typing import Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageMetadataRead(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int = Field(
        validation_alias=AliasChoices("total_pages", "totalPages"),
        serialization_alias="totalPages",
    )

    model_config = ConfigDict(from_attributes=True)


class PageRead(BaseModel, Generic[T]):
    data: list[T]
    metadata: PageMetadataRead

    model_config = ConfigDict(from_attributes=True)
