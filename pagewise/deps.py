"""Shared FastAPI dependencies."""

from dataclasses import dataclass

from fastapi import Request

from pagewise.core.config import PaginationConfig, get_settings
from pagewise.core.pagination import coerce_int
from pagewise.core.paginator import Paginator
from pagewise.sources.base import DataSource, SourceRegistry


@dataclass(frozen=True)
class PageParams:
    page: int
    size: int


def get_page_params(request: Request) -> PageParams:
    """Dependency: raw page/size from the query string (`limit` is accepted for size)."""
    query = request.query_params
    raw_size = query.get("size")
    if raw_size is None:
        raw_size = query.get("limit")
    return PageParams(page=coerce_int(query.get("page")), size=coerce_int(raw_size))


def get_paginator() -> Paginator:
    """Dependency: paginator bounded by the configured min/max page size."""
    return Paginator(PaginationConfig.from_settings(get_settings()))


def get_registry(request: Request) -> SourceRegistry:
    return request.app.state.sources


def get_source(name: str, request: Request) -> DataSource:
    """Dependency: named data source; 404 when nothing is registered under `name`."""
    return get_registry(request).get(name)
