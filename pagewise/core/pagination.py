"""Pagination parameter normalization.

Raw page/size values come straight from query strings and are never trusted;
they are coerced to the nearest valid value instead of being rejected.
"""

from dataclasses import dataclass
from typing import Any

from pagewise.core.config import DEFAULT_MAX_SIZE, DEFAULT_MIN_SIZE, PaginationConfig, effective_max_size


def coerce_int(value: Any) -> int:
    """Parse a raw query value; absent or non-numeric input becomes 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


def normalize(
    raw_page: int | None,
    raw_size: int | None,
    min_size: int = DEFAULT_MIN_SIZE,
    max_size: int = DEFAULT_MAX_SIZE,
) -> tuple[int, int]:
    """Clamp page/size; return (page, size)."""
    size = raw_size if raw_size is not None and raw_size > 0 else 0
    if size < min_size:
        size = min_size
    effective_max = effective_max_size(max_size)
    if size > effective_max:
        size = effective_max
    page = raw_page if raw_page is not None and raw_page > 0 else 1
    return page, size


def offset(page: int, size: int) -> int:
    return (max(page, 1) - 1) * size


def page_count(records: int, size: int) -> int:
    """Number of pages for `records` rows; an empty result still has one page."""
    if records <= 0 or size <= 0:
        return 1
    pages, rest = divmod(records, size)
    if rest:
        pages += 1
    return max(pages, 1)


@dataclass(frozen=True)
class PaginationOptions:
    """Caller-supplied overrides; any field left as None defers to the request."""

    page: int | None = None
    size: int | None = None
    max_size: int | None = None
    debug: bool | None = None


@dataclass(frozen=True)
class PaginationRequest:
    raw_page: int | None = None
    raw_size: int | None = None
    min_size: int = DEFAULT_MIN_SIZE
    max_size: int = DEFAULT_MAX_SIZE
    debug: bool = False

    @classmethod
    def build(
        cls,
        raw_page: int | None,
        raw_size: int | None,
        config: PaginationConfig | None = None,
        options: PaginationOptions | None = None,
    ) -> "PaginationRequest":
        config = config or PaginationConfig()
        options = options or PaginationOptions()
        return cls(
            raw_page=options.page if options.page is not None else raw_page,
            raw_size=options.size if options.size is not None else raw_size,
            min_size=config.min_size,
            max_size=options.max_size if options.max_size is not None else config.max_size,
            debug=bool(options.debug),
        )

    @property
    def effective_max_size(self) -> int:
        return effective_max_size(self.max_size)

    def normalize(self) -> tuple[int, int]:
        return normalize(self.raw_page, self.raw_size, self.min_size, self.max_size)
