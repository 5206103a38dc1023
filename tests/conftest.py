import os
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

# Pin page size bounds regardless of the developer's environment
os.environ["PAGINATION_MIN_SIZE"] = "10"
os.environ["PAGINATION_MAX_SIZE"] = "50"

from pagewise.sources.base import DataSource, SourceRegistry  # noqa: E402
from pagewise.sources.memory import MemorySource  # noqa: E402


class BrokenSource(DataSource):
    """Source whose count or fetch raises; records every call it receives."""

    def __init__(self, fail_on: str, records: int = 25, error: Exception | None = None) -> None:
        self.fail_on = fail_on
        self.records = records
        self.error = error or RuntimeError(f"{fail_on} exploded")
        self.fetch_calls: list[tuple[int, int]] = []
        self.debug_seen: list[bool] = []
        self.name = "broken"

    @property
    def count_calls(self) -> int:
        return len(self.debug_seen)

    def count(self) -> int:
        self.debug_seen.append(self.debug)
        if self.fail_on == "count":
            raise self.error
        return self.records

    def fetch(self, limit: int, offset: int) -> list:
        self.fetch_calls.append((limit, offset))
        if self.fail_on == "fetch":
            raise self.error
        return list(range(offset, min(offset + limit, self.records)))


def make_rows(n: int) -> list[dict]:
    return [{"id": i, "name": f"row-{i}"} for i in range(n)]


@pytest.fixture
def rows_source() -> MemorySource:
    return MemorySource(make_rows(95), name="rows")


@pytest.fixture
def registry(rows_source) -> Generator[SourceRegistry, None, None]:
    from pagewise.main import app
    previous = app.state.sources
    reg = SourceRegistry()
    reg.register("rows", rows_source)
    reg.register("empty", MemorySource([], name="empty"))
    reg.register("broken-count", BrokenSource("count"))
    reg.register("broken-fetch", BrokenSource("fetch"))
    app.state.sources = reg
    yield reg
    app.state.sources = previous


@pytest.fixture
def client(registry) -> Generator[TestClient, None, None]:
    from pagewise.main import app
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(registry) -> AsyncGenerator[AsyncClient, None]:
    from pagewise.main import app
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def broken_source() -> type[BrokenSource]:
    return BrokenSource
