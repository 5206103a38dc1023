from typing import Any, Callable, Iterable, Sequence, TypeVar

from pagewise.core.logging import get_query_logger
from pagewise.sources.base import DataSource

T = TypeVar("T")

Predicate = Callable[[T], bool]


class MemorySource(DataSource[T]):
    """List-backed source; predicate and ordering are fixed at construction."""

    def __init__(
        self,
        rows: Iterable[T],
        predicate: Predicate | None = None,
        sort_key: Callable[[T], Any] | None = None,
        reverse: bool = False,
        name: str = "memory",
    ) -> None:
        self.rows: Sequence[T] = list(rows)
        self.predicate = predicate
        self.sort_key = sort_key
        self.reverse = reverse
        self.name = name
        self.debug = False

    def filter(self, predicate: Predicate) -> "MemorySource[T]":
        """New source restricted to rows matching both predicates."""
        current = self.predicate
        if current is None:
            combined = predicate
        else:
            combined = lambda row: current(row) and predicate(row)  # noqa: E731
        return MemorySource(
            self.rows,
            predicate=combined,
            sort_key=self.sort_key,
            reverse=self.reverse,
            name=self.name,
        )

    def _matching(self) -> list[T]:
        rows = [r for r in self.rows if self.predicate is None or self.predicate(r)]
        if self.sort_key is not None:
            rows.sort(key=self.sort_key, reverse=self.reverse)
        return rows

    def count(self) -> int:
        total = len(self._matching())
        if self.debug:
            get_query_logger(self.name).debug("query_count", total=total)
        return total

    def fetch(self, limit: int, offset: int) -> list[T]:
        rows = self._matching()[offset:offset + limit]
        if self.debug:
            get_query_logger(self.name).debug("query_fetch", limit=limit, offset=offset, returned=len(rows))
        return rows
