"""Count-then-fetch page loading."""

from typing import Generic, TypeVar

from pagewise.core.config import PaginationConfig
from pagewise.core.exceptions import CountError, FetchError, InvalidTransitionError
from pagewise.core.logging import get_logger
from pagewise.core.pagination import PaginationOptions, PaginationRequest
from pagewise.core.result import LOAD_ERROR_MESSAGE, PaginationResult, Phase
from pagewise.sources.base import DataSource

T = TypeVar("T")

log = get_logger(__name__)


class Paginator(Generic[T]):
    def __init__(self, config: PaginationConfig | None = None) -> None:
        self.config = config or PaginationConfig()

    def request(
        self,
        raw_page: int | None = None,
        raw_size: int | None = None,
        options: PaginationOptions | None = None,
    ) -> PaginationRequest:
        return PaginationRequest.build(raw_page, raw_size, self.config, options)

    def prepare(
        self,
        raw_page: int | None = None,
        raw_size: int | None = None,
        options: PaginationOptions | None = None,
    ) -> PaginationResult[T]:
        """Normalize raw inputs into an unloaded result."""
        return self._start(self.request(raw_page, raw_size, options))

    def load(self, state: PaginationResult[T], source: DataSource[T]) -> PaginationResult[T]:
        """
        Count matching rows, then fetch the page they allow.
        Raises CountError / FetchError chained from the data-source exception;
        the exception's `result` is the failed snapshot. The fetch is never
        issued if counting fails. A debug snapshot queries a debug-tagged copy
        of `source`, never the source itself.
        """
        if state.phase is not Phase.INIT:
            raise InvalidTransitionError(f"cannot load a result in phase {state.phase.value!r}")
        if state.debug:
            source = source.enable_debug()

        try:
            records = source.count()
            if records < 0:
                raise ValueError(f"data source returned a negative count: {records}")
        except Exception as exc:
            log.warning("pagination_count_failed", source=source.name, error=repr(exc))
            raise CountError(state.failed()) from exc

        state = state.counted(records)

        try:
            rows = source.fetch(limit=state.limit, offset=state.offset)
        except Exception as exc:
            log.warning(
                "pagination_fetch_failed",
                source=source.name,
                limit=state.limit,
                offset=state.offset,
                error=repr(exc),
            )
            raise FetchError(state.failed(LOAD_ERROR_MESSAGE)) from exc

        state = state.loaded(rows)
        log.debug(
            "pagination_loaded",
            source=source.name,
            records=state.records,
            page=state.current_page,
            pages=state.pages,
            size=state.size,
        )
        return state

    def paginate(
        self,
        source: DataSource[T],
        raw_page: int | None = None,
        raw_size: int | None = None,
        options: PaginationOptions | None = None,
    ) -> PaginationResult[T]:
        return self.load(self.prepare(raw_page, raw_size, options), source)

    def _start(self, req: PaginationRequest) -> PaginationResult[T]:
        page, size = req.normalize()
        return PaginationResult.start(page, size, req.effective_max_size, debug=req.debug)


def paginate(
    source: DataSource[T],
    raw_page: int | None = None,
    raw_size: int | None = None,
    options: PaginationOptions | None = None,
    config: PaginationConfig | None = None,
) -> PaginationResult[T]:
    """One-shot pagination with the given (or default) size bounds."""
    return Paginator(config).paginate(source, raw_page, raw_size, options)
