from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, AsyncIterator, List

from tileindex.utils.entry import FSEntry


class AsyncConnector(ABC):
    """Abstract class for async read-only connector."""

    @asynccontextmanager
    async def connect(self) -> AsyncGenerator['AsyncConnector', None]:
        """Connects to file system.

        Yields
        -------
        AsyncConnector
            Class instance
        """
        yield self

    @abstractmethod
    @asynccontextmanager
    async def open(self, path: str, mode: str) -> AsyncIterator[Any]:
        yield None

    @abstractmethod
    async def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    async def isfile(self, path: str) -> bool:
        pass

    @abstractmethod
    async def isdir(self, path: str) -> bool:
        pass

    @abstractmethod
    async def stat(self, path: str) -> FSEntry:
        pass

    @abstractmethod
    async def scandir(self, path: str) -> List[FSEntry]:
        pass
