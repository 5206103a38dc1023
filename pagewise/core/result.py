"""Pagination result snapshots.

A result moves through INIT -> COUNTED -> DONE, or ends in FAILED. Each step
returns a new frozen snapshot; nothing is mutated in place.
"""

from enum import Enum
from typing import Any, Generic, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from pagewise.core import pagination
from pagewise.core.exceptions import InvalidTransitionError

T = TypeVar("T")

LOAD_ERROR_MESSAGE = "unable to load data from the database"


class Phase(str, Enum):
    INIT = "init"
    COUNTED = "counted"
    DONE = "done"
    FAILED = "failed"


TERMINAL_PHASES = (Phase.DONE, Phase.FAILED)


class PaginationResult(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    success: bool = False
    error: str | None = None
    records: int = 0
    current_page: int = 1
    pages: int = 1
    size: int
    max_size: int
    first: int = 0
    last: int = 0
    data: list[T] = Field(default_factory=list)
    phase: Phase = Field(default=Phase.INIT, exclude=True)
    debug: bool = Field(default=False, exclude=True)

    @classmethod
    def start(cls, page: int, size: int, max_size: int, debug: bool = False) -> "PaginationResult[T]":
        """Bind a normalized (page, size) pair before anything is queried."""
        return cls(current_page=max(page, 1), size=size, max_size=max_size, debug=debug)

    def counted(self, records: int) -> "PaginationResult[T]":
        """Derive page metadata once the total row count is known.

        The requested page is clamped into [1, pages] here, so a page past
        the end is served as the last page.
        """
        self._expect("counted", Phase.INIT)
        if records < 0:
            raise ValueError(f"records must be >= 0, got {records}")
        pages = pagination.page_count(records, self.size)
        current = min(max(self.current_page, 1), pages)
        first = pagination.offset(current, self.size)
        return self.model_copy(
            update={
                "records": records,
                "pages": pages,
                "current_page": current,
                "first": first,
                "last": min(first + self.size, records),
                "phase": Phase.COUNTED,
            }
        )

    def loaded(self, rows: Iterable[T]) -> "PaginationResult[T]":
        self._expect("loaded", Phase.COUNTED)
        return self.model_copy(
            update={
                "success": True,
                "error": None,
                "data": list(rows),
                "phase": Phase.DONE,
            }
        )

    def failed(self, message: str | None = None) -> "PaginationResult[T]":
        self._expect("failed", Phase.INIT, Phase.COUNTED)
        return self.model_copy(
            update={
                "success": False,
                "error": message,
                "phase": Phase.FAILED,
            }
        )

    def _expect(self, transition: str, *allowed: Phase) -> None:
        if self.phase not in allowed:
            raise InvalidTransitionError(f"cannot apply {transition!r} to a result in phase {self.phase.value!r}")

    @property
    def offset(self) -> int:
        return pagination.offset(self.current_page, self.size)

    @property
    def limit(self) -> int:
        return self.size

    @property
    def executed(self) -> bool:
        return self.phase in TERMINAL_PHASES

    @property
    def has_next(self) -> bool:
        return self.current_page < self.pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    def to_payload(self) -> dict[str, Any]:
        """Serialized response shape; `error` is left out when unset."""
        payload = self.model_dump(mode="json")
        if payload.get("error") is None:
            payload.pop("error", None)
        return payload
