from typing import Callable, Iterable, TypeVar

from pagewise.core.logging import get_query_logger
from pagewise.sources.base import DataSource

T = TypeVar("T")


class CallableSource(DataSource[T]):
    """Wraps a count function and a fetch function into a DataSource.

    Lets an existing query layer (an ORM query, an HTTP API, ...) be paged
    without writing a subclass.
    """

    def __init__(
        self,
        count_fn: Callable[[], int],
        fetch_fn: Callable[[int, int], Iterable[T]],
        name: str = "callable",
    ) -> None:
        self.count_fn = count_fn
        self.fetch_fn = fetch_fn
        self.name = name
        self.debug = False

    def count(self) -> int:
        total = int(self.count_fn())
        if self.debug:
            get_query_logger(self.name).debug("query_count", total=total)
        return total

    def fetch(self, limit: int, offset: int) -> list[T]:
        rows = list(self.fetch_fn(limit, offset))
        if self.debug:
            get_query_logger(self.name).debug("query_fetch", limit=limit, offset=offset, returned=len(rows))
        return rows
