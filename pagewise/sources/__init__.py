from pagewise.sources.adapter import CallableSource
from pagewise.sources.base import DataSource, SourceRegistry
from pagewise.sources.memory import MemorySource

__all__ = [
    "CallableSource",
    "DataSource",
    "MemorySource",
    "SourceRegistry",
]
