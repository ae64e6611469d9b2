"""Query parameters shared by paginated listings."""

from collections.abc import Callable

from fastapi import Query

from tradersbloc.domain.pagination import PageRequest


def page_params(default_sort_order: str = "desc") -> Callable[..., PageRequest]:
    """Build a dependency reading ``page``, ``limit``, ``sortBy`` and ``sortOrder``."""

    def dependency(
        page: int = Query(1),
        limit: int = Query(10),
        sort_by: str | None = Query(None, alias="sortBy"),
        sort_order: str = Query(default_sort_order, alias="sortOrder"),
    ) -> PageRequest:
        return PageRequest(page=page, limit=limit, sort_by=sort_by, sort_order=sort_order)

    return dependency


__all__ = ["page_params"]
