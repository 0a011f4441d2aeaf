"""Shared listing engine: search, deterministic sort and pagination."""

import math
from typing import Any, Generic, TypeVar

from sqlalchemy import or_
from sqlalchemy.orm import Query

from src.schemas.common import ListParams, SortOption

T = TypeVar("T")


class PageInfo:
    """Pagination metadata. `total` counts every row matching the filters."""

    def __init__(self, total: int, page: int, limit: int):
        self.total = total
        self.page = page
        self.limit = limit

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def has_next_page(self) -> bool:
        return self.page * self.limit < self.total

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1


class PageResult(Generic[T]):
    """One page of rows. Read by the `Page` schema through its attributes."""

    def __init__(self, data: list[T], metadata: PageInfo):
        self.data = data
        self.metadata = metadata


def sort_clauses(model: Any, name_column: Any, sort: SortOption) -> list:
    """ORDER BY clauses for a sort option.

    The primary key breaks ties in the same direction, so z-a is the exact
    reverse of a-z.
    """
    if sort == SortOption.Z_A:
        return [name_column.desc(), model.id.desc()]
    if sort == SortOption.NEWEST:
        return [model.created_at.desc(), model.id.desc()]
    if sort == SortOption.LATEST:
        return [model.updated_at.desc(), model.id.desc()]
    return [name_column.asc(), model.id.asc()]


def apply_search(query: Query, search: str | None, search_columns: list) -> Query:
    """Case-insensitive substring match on any of the columns."""
    if not search:
        return query
    return query.filter(
        or_(*(column.icontains(search, autoescape=True) for column in search_columns))
    )


def paginate(
    query: Query,
    params: ListParams,
    *,
    model: Any,
    name_column: Any,
    search_columns: list,
) -> PageResult:
    """Run a listing query.

    `query` may already carry relationship filters; the search is ANDed with
    them and `total` is counted before offset/limit are applied.
    """
    query = apply_search(query, params.search, search_columns)
    total = query.order_by(None).count()

    rows = (
        query.order_by(*sort_clauses(model, name_column, params.sort))
        .offset((params.page - 1) * params.limit)
        .limit(params.limit)
        .all()
    )
    metadata = PageInfo(total=total, page=params.page, limit=params.limit)
    return PageResult(data=rows, metadata=metadata)
