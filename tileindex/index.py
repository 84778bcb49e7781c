import logging
import os
from dataclasses import dataclass
from typing import List, Literal, Optional

from tileindex.config import IndexConfig
from tileindex.connector import Connector
from tileindex.filters import split_entries
from tileindex.local import LocalConnector
from tileindex.pagination import Page, paginate
from tileindex.presentation import Presentation, resolve
from tileindex.urls import IndexUrls
from tileindex.utils.entry import FSEntry

logger = logging.getLogger(__name__)

FOLDER_ICON = 'folder.png'
PREVIOUS_ICON = 'prev.png'
NEXT_ICON = 'next.png'


@dataclass
class Tile:
    kind: Literal['up', 'previous', 'next', 'dir', 'file']
    name: str
    link: str
    icon: Optional[str] = None
    presentation: Optional[Presentation] = None


class DirectoryIndex:
    """Paged tile listing of a directory.

    Attributes
    ----------
    connector : Connector
        Connector used to list directories and check sidecar files.
    config : IndexConfig
        Index settings.
    """

    def __init__(
        self,
        connector: Optional[Connector] = None,
        config: Optional[IndexConfig] = None
    ):
        self.connector = connector or LocalConnector()
        self.config = config or IndexConfig()

    def scan(self, path: str, show_hidden: bool = False) -> tuple[List[FSEntry], List[FSEntry]]:
        """List visible directories (descending) and files (ascending) of a directory."""
        return split_entries(self.connector.scandir(path), show_hidden)

    def list_page(
        self,
        path: str,
        page: int = 0,
        page_size: Optional[int] = None,
        show_hidden: bool = False
    ) -> Page[FSEntry]:
        """Get one page of a directory listing.

        Parameters
        ----------
        path : str
            Existing directory path.
        page : int, default=0
            Page index.
        page_size : int, optional
            Page size, the configured page size if omitted.
        show_hidden : bool, default=False
            Include hidden entries.

        Returns
        -------
        Page[FSEntry]
            Directories and files of the page.
        """
        if page_size is None:
            page_size = self.config.page_size
        logger.debug(f"listing '{path}', page={page}, size={page_size}")
        directories, files = self.scan(path, show_hidden)
        return paginate(directories, files, page, page_size)

    def tiles(
        self,
        path: str,
        urls: IndexUrls,
        page: int = 0,
        page_size: Optional[int] = None,
        show_hidden: bool = False
    ) -> List[Tile]:
        """Build the tiles of one index page.

        The page starts with an up tile below the root and a previous tile
        after the first page, then directories and files, and ends with a
        next tile while items remain.
        """
        result = self.list_page(path, page, page_size, show_hidden)
        page_size = result.page_size
        tiles = []
        if not urls.is_root:
            tiles.append(Tile('up', '..', urls.up(page_size), urls.resource(FOLDER_ICON)))
        if result.has_previous:
            tiles.append(Tile(
                'previous', f'Previous {page_size}',
                urls.index(urls.uri, result.page - 1, page_size), urls.resource(PREVIOUS_ICON)
            ))
        for directory in result.directories:
            tiles.append(Tile(
                'dir', directory.name,
                urls.index(urls.dir(directory.name), page_size=page_size), urls.resource(FOLDER_ICON)
            ))
        for file in result.files:
            presentation = resolve(file.path, urls, self.config.thumbnail_size, self.connector.isfile)
            tiles.append(Tile('file', os.path.basename(file.path), presentation.link, presentation=presentation))
        if result.has_next:
            tiles.append(Tile(
                'next', f'Next {result.next_count}',
                urls.index(urls.uri, result.page + 1, page_size), urls.resource(NEXT_ICON)
            ))
        return tiles
