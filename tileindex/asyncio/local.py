import os
import aiofiles
import aiofiles.os
from typing import List, Any
from contextlib import asynccontextmanager

from tileindex.utils.entry import FSEntry, entry_from_stat
from tileindex.asyncio.connector import AsyncConnector


class AsyncLocalConnector(AsyncConnector):
    """Async local file system connector."""

    @classmethod
    @asynccontextmanager
    async def connect(cls) -> 'AsyncLocalConnector':
        """Connects to file system.

        Yields
        -------
        AsyncLocalConnector
            Class instance
        """
        yield cls()

    @asynccontextmanager
    async def open(self, path: str, mode: str = 'rb') -> Any:
        async with aiofiles.open(path, mode) as f:
            yield f

    async def exists(self, path: str) -> bool:
        return await aiofiles.os.path.exists(path)

    async def isfile(self, path: str) -> bool:
        return await aiofiles.os.path.isfile(path)

    async def isdir(self, path: str) -> bool:
        return await aiofiles.os.path.isdir(path)

    async def stat(self, path: str) -> FSEntry:
        if not await self.exists(path):
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        path = os.path.normpath(path)
        return entry_from_stat(os.path.basename(path), path, await aiofiles.os.stat(path))

    async def scandir(self, path: str) -> List[FSEntry]:
        result = []
        # TODO: async stat of every entry
        with await aiofiles.os.scandir(path) as it:
            for entry in it:
                if entry.is_dir() or entry.is_file():
                    result.append(entry_from_stat(entry.name, entry.path, entry.stat()))
        return result
