import copy
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pagewise.core.exceptions import NotFoundError

T = TypeVar("T")


class DataSource(ABC, Generic[T]):
    """Countable, sliceable rows with filters and ordering already bound."""

    name: str = "source"
    debug: bool = False

    @abstractmethod
    def count(self) -> int:
        """Return the total number of matching rows."""
        ...

    @abstractmethod
    def fetch(self, limit: int, offset: int) -> list[T]:
        """Return at most `limit` rows starting at `offset`, in source order."""
        ...

    def enable_debug(self) -> "DataSource[T]":
        """Copy of this source with verbose query logging on; `self` is left as is."""
        tagged = copy.copy(self)
        tagged.debug = True
        return tagged


class SourceRegistry:
    """Named data sources exposed by the HTTP layer."""

    def __init__(self) -> None:
        self._sources: dict[str, DataSource] = {}

    def register(self, name: str, source: DataSource) -> None:
        self._sources[name] = source

    def get(self, name: str) -> DataSource:
        source = self._sources.get(name)
        if source is None:
            raise NotFoundError(f"Unknown collection: {name}")
        return source

    def names(self) -> list[str]:
        return sorted(self._sources)

    def __contains__(self, name: object) -> bool:
        return name in self._sources
