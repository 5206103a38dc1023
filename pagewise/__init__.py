"""Offset pagination over countable data sources."""

from pagewise.core.config import PaginationConfig
from pagewise.core.exceptions import CountError, FetchError, PaginationError
from pagewise.core.pagination import PaginationOptions, PaginationRequest, normalize
from pagewise.core.paginator import Paginator, paginate
from pagewise.core.result import PaginationResult, Phase
from pagewise.sources import CallableSource, DataSource, MemorySource

__all__ = [
    "CallableSource",
    "CountError",
    "DataSource",
    "FetchError",
    "MemorySource",
    "PaginationConfig",
    "PaginationError",
    "PaginationOptions",
    "PaginationRequest",
    "PaginationResult",
    "Paginator",
    "Phase",
    "normalize",
    "paginate",
]
