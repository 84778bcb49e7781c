from tileindex.asyncio.archive import AsyncArchiveBuilder
from tileindex.asyncio.connector import AsyncConnector
from tileindex.asyncio.local import AsyncLocalConnector

__all__ = ['AsyncArchiveBuilder', 'AsyncConnector', 'AsyncLocalConnector']
