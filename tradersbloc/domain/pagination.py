"""Pagination primitives shared by the listing use cases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from .errors import BadRequest

T = TypeVar("T")

SORT_ORDERS = ("asc", "desc")


@dataclass(frozen=True)
class PageRequest:
    """Requested slice of a collection."""

    page: int = 1
    limit: int = 10
    sort_by: str | None = None
    sort_order: str = "desc"

    def __post_init__(self) -> None:
        if self.page < 1:
            raise BadRequest("page must be greater than or equal to 1")
        if self.limit < 1:
            raise BadRequest("limit must be greater than or equal to 1")
        if self.sort_order not in SORT_ORDERS:
            raise BadRequest("sortOrder must be either 'asc' or 'desc'")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PageMetadata:
    total: int
    page: int
    limit: int
    total_pages: int


@dataclass(frozen=True)
class Page(Generic[T]):
    data: list[T]
    metadata: PageMetadata


def count_pages(total: int, limit: int) -> int:
    """Return ``ceil(total / limit)`` using integer arithmetic."""

    return -(-total // limit)


def build_page(items: Sequence[T], *, total: int, request: PageRequest) -> Page[T]:
    return Page(
        data=list(items),
        metadata=PageMetadata(
            total=total,
            page=request.page,
            limit=request.limit,
            total_pages=count_pages(total, request.limit),
        ),
    )


__all__ = ["Page", "PageMetadata", "PageRequest", "build_page", "count_pages"]
