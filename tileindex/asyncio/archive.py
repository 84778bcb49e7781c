import logging
import zipfile
from collections.abc import AsyncGenerator
from typing import Any, List, Optional

from tileindex.archive import (
    DEFAULT_CHUNK_SIZE,
    ArchiveRequest,
    archive_path,
    make_info,
    order_files,
    order_subdirectories,
)
from tileindex.asyncio.connector import AsyncConnector
from tileindex.asyncio.local import AsyncLocalConnector
from tileindex.filters import split_entries
from tileindex.utils.entry import FSEntry
from tileindex.utils.stream import ChunkBuffer

logger = logging.getLogger(__name__)


class AsyncArchiveBuilder:
    """Async zip archive builder.

    The archive is produced as a sequence of byte chunks. Source files are
    read through the async connector, so the build suspends on file I/O and
    can be cancelled like any other task.

    Attributes
    ----------
    connector : AsyncConnector
        Async connector used to read the source tree.
    chunk_size : int
        Read chunk size in bytes.
    """

    def __init__(
        self,
        connector: Optional[AsyncConnector] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE
    ):
        self.connector = connector or AsyncLocalConnector()
        self.chunk_size = chunk_size

    async def stream(
        self,
        root_path: str,
        request: ArchiveRequest
    ) -> AsyncGenerator[bytes, None]:
        """Produce a zip archive of a file or directory.

        Parameters
        ----------
        root_path : str
            File or directory to archive.
        request : ArchiveRequest
            Archive options.

        Yields
        -------
        bytes
            Archive chunks in output order.

        Raises
        ------
        FileNotFoundError
            If ``root_path`` is neither a file nor a directory.
        """
        entries = await self._plan(root_path, request)
        buffer = ChunkBuffer()
        with zipfile.ZipFile(buffer, 'w', compression=request.compression) as zf, buffer.guard():
            async for entry, arcname in entries:
                info = make_info(entry, arcname, request.compression)
                async with self.connector.open(entry.path, 'rb') as src_file:
                    with zf.open(info, 'w') as dst_file, buffer.guard():
                        chunk = await src_file.read(self.chunk_size)
                        while chunk:
                            dst_file.write(chunk)
                            if len(buffer):
                                yield buffer.drain()
                            chunk = await src_file.read(self.chunk_size)
                logger.debug(f"added '{entry.path}' as '{arcname}'")
                if len(buffer):
                    yield buffer.drain()
        if len(buffer):
            yield buffer.drain()

    async def build(self, root_path: str, request: ArchiveRequest, output: Any) -> int:
        """Write a zip archive of a file or directory to an async stream.

        Parameters
        ----------
        root_path : str
            File or directory to archive.
        request : ArchiveRequest
            Archive options.
        output : Any
            Async writable, e.g. a file opened with ``aiofiles``.

        Returns
        -------
        int
            Bytes written.
        """
        written = 0
        async for chunk in self.stream(root_path, request):
            await output.write(chunk)
            written += len(chunk)
        return written

    async def _plan(self, root_path: str, request: ArchiveRequest) -> AsyncGenerator[tuple[FSEntry, str], None]:
        if await self.connector.isfile(root_path):
            entry = await self.connector.stat(root_path)
            return self._single(entry)
        elif await self.connector.isdir(root_path):
            return self._walk(root_path, '', request)
        raise FileNotFoundError(f"No such file or directory: '{root_path}'")

    @staticmethod
    async def _single(entry: FSEntry) -> AsyncGenerator[tuple[FSEntry, str], None]:
        yield entry, entry.name

    async def _walk(
        self,
        path: str,
        destination: str,
        request: ArchiveRequest
    ) -> AsyncGenerator[tuple[FSEntry, str], None]:
        directories, files = split_entries(await self.connector.scandir(path), request.include_hidden)
        for entry in order_files(files, request.exclude):
            yield entry, archive_path(destination, entry.name)
        if request.recursive:
            for directory in order_subdirectories(directories):
                logger.debug(f"entering '{directory.path}'")
                async for item in self._walk(directory.path, archive_path(destination, directory.name), request):
                    yield item

    async def entries(self, root_path: str, request: ArchiveRequest) -> List[tuple[FSEntry, str]]:
        """List the entries and archive names a build would write, in order."""
        return [item async for item in await self._plan(root_path, request)]
