from tileindex.archive import ArchiveBuilder, ArchiveCancelled, ArchiveRequest
from tileindex.asyncio.archive import AsyncArchiveBuilder
from tileindex.asyncio.local import AsyncLocalConnector
from tileindex.config import IndexConfig
from tileindex.filters import is_visible
from tileindex.index import DirectoryIndex, Tile
from tileindex.local import LocalConnector
from tileindex.pagination import DEFAULT_PAGE_SIZE, Page, paginate, parse_page_params
from tileindex.presentation import Presentation, resolve
from tileindex.urls import IndexUrls
from tileindex.utils.entry import FSEntry

__all__ = [
    'ArchiveBuilder',
    'ArchiveCancelled',
    'ArchiveRequest',
    'AsyncArchiveBuilder',
    'AsyncLocalConnector',
    'DEFAULT_PAGE_SIZE',
    'DirectoryIndex',
    'FSEntry',
    'IndexConfig',
    'IndexUrls',
    'LocalConnector',
    'Page',
    'Presentation',
    'Tile',
    'is_visible',
    'paginate',
    'parse_page_params',
    'resolve',
]
