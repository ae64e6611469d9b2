"""Query helpers shared by the paginated repository listings."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import ColumnElement, or_
from sqlalchemy.orm import Query

from tradersbloc.domain.errors import BadRequest
from tradersbloc.domain.pagination import PageRequest


def contains_any(term: str, *columns: Any) -> ColumnElement[bool]:
    """Return a case-insensitive substring match of ``term`` over ``columns``.

    ``%`` and ``_`` in ``term`` match literally.
    """

    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    pattern = f"%{escaped}%"
    return or_(*(column.ilike(pattern, escape="\\") for column in columns))


def apply_range(query: Query, column: Any, lower: Any = None, upper: Any = None) -> Query:
    """Restrict ``column`` to the inclusive ``[lower, upper]`` interval."""

    if lower is not None:
        query = query.filter(column >= lower)
    if upper is not None:
        query = query.filter(column <= upper)
    return query


def paginate(
    query: Query,
    request: PageRequest,
    *,
    sort_columns: Mapping[str, Any],
    default_order: Sequence[Any],
    tiebreaker: Any,
) -> tuple[list[Any], int]:
    """Return one page of ``query`` results together with the total count.

    ``request.sort_by`` must be one of the keys of ``sort_columns``;
    unrecognised keys are rejected with :class:`BadRequest`.
    """

    if request.sort_by:
        column = sort_columns.get(request.sort_by)
        if column is None:
            allowed = ", ".join(sorted(sort_columns))
            raise BadRequest(
                f"Unsupported sort key '{request.sort_by}'. Allowed keys: {allowed}"
            )
        ordering = [column.asc() if request.sort_order == "asc" else column.desc()]
    else:
        ordering = list(default_order)

    total = query.order_by(None).count()
    rows = (
        query.order_by(*ordering, tiebreaker)
        .offset(request.offset)
        .limit(request.limit)
        .all()
    )
    return rows, total


__all__ = ["apply_range", "contains_any", "paginate"]
